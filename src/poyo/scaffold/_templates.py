"""Scaffolding templates for generated route files.

Rendered with kida.  Autoescaping is off: the output is TSX, Razor, and
C#, not HTML.  Only ``{{ ... }}`` expressions are used, so the literal
braces of the target languages pass through untouched.
"""

from kida import Environment

_env = Environment(autoescape=False)

# ---------------------------------------------------------------------------
# Client page (<name>.client/src/pages/...)
# ---------------------------------------------------------------------------

PAGE_TSX = """\
import type React from 'react';

const {{ component }}: React.FC = () => {
  return (
    <div className="p-4">
      <h1 className="text-2xl font-bold">{{ name }}</h1>
    </div>
  );
}

export default {{ component }};
"""

# ---------------------------------------------------------------------------
# Server view (<Name>.Server/Views/...)
# ---------------------------------------------------------------------------

VIEW_CSHTML = """\
@{
    ViewBag.Title = "{{ name }}";
}

<div id="react-root" data-page-name="{{ name }}"></div>
"""

# ---------------------------------------------------------------------------
# Controllers (<Name>.Server/Controllers/...)
# ---------------------------------------------------------------------------

CONTROLLER_CS = """\
using Microsoft.AspNetCore.Mvc;

namespace Poyo.Server.Controllers;

public class {{ controller }} : Controller
{
    public IActionResult {{ action }}()
    {
        return View("~/{{ view_path }}");
    }
}
"""

ACTION_CS = """
    public IActionResult {{ action }}()
    {
        return View("~/{{ view_path }}");
    }
"""


def render(source: str, **context: str) -> str:
    """Render one of the templates above.

    Trailing newlines are normalized to exactly one so generated files
    end the same way regardless of how the engine treats the final
    line break.
    """
    text = _env.from_string(source).render(context)
    return text.rstrip("\n") + "\n"


def render_page(name: str, component: str) -> str:
    return render(PAGE_TSX, name=name, component=component)


def render_view(name: str) -> str:
    return render(VIEW_CSHTML, name=name)


def render_controller(controller: str, action: str, view_path: str) -> str:
    return render(CONTROLLER_CS, controller=controller, action=action, view_path=view_path)


def render_action(action: str, view_path: str) -> str:
    """Render the injected action snippet: blank line, method, newline."""
    text = _env.from_string(ACTION_CS).render({"action": action, "view_path": view_path})
    return "\n" + text.strip("\n") + "\n"
