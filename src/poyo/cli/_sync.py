"""``poyo route sync`` — check and repair drift between routes.json and disk."""

from poyo.config import ProjectConfig
from poyo.prompts import Prompter
from poyo.sync import Reconciler


def run_sync(config: ProjectConfig, prompter: Prompter) -> None:
    """Report drift, then apply the remedy chosen through *prompter*."""
    print("Checking route consistency...")
    reconciler = Reconciler(config, prompter)
    report = reconciler.detect()
    for line in report.summary_lines():
        print(line)
    if report.healthy:
        return

    print()
    outcome = reconciler.resolve(report)
    for line in outcome.lines:
        print(line)
