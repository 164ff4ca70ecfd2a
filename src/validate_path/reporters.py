"""Classification result reporters."""

import json

from rich.markup import escape

from common.logger import get_logger

from .models import IssueSeverity, PathValidationResult

logger = get_logger(__name__)


class PathReporter:
    """Format and display classification results."""

    def __init__(self, show_info: bool = True):
        """Initialize the reporter.

        Args:
            show_info: Whether to show info-level messages
        """
        self.show_info = show_info

    def report_console(self, results: list[PathValidationResult]) -> int:
        """Print classification results to the console.

        Args:
            results: Results to report

        Returns:
            Exit code (0 if every path is valid, 1 otherwise)
        """
        total_invalid = 0
        total_warnings = 0
        total_info = 0

        for result in results:
            if result.is_valid:
                status = "[green]✓ valid[/green]"
            else:
                total_invalid += 1
                status = "[red]✗ invalid[/red]"
            label = escape(repr(result.path))
            logger.info(f"[bold]{label}[/bold] ({result.path_type.value}): {status}")

            for issue in result.log.issues:
                if issue.severity == IssueSeverity.WARNING:
                    total_warnings += 1
                    icon = "[yellow]⚠[/yellow]"
                else:
                    total_info += 1
                    icon = "ℹ"

                if not self.show_info and issue.severity == IssueSeverity.INFO:
                    continue

                for line_num, line in enumerate(issue.message.split("\n")):
                    prefix = f"  {icon} " if line_num == 0 else "      "
                    text = escape(line.strip().replace("\t", " "))
                    logger.info(f"{prefix}{text}")

        logger.info("=" * 60)
        logger.info(
            f"Total: [bold]{len(results)}[/bold] paths, [bold]{total_invalid}[/bold] invalid, "
            f"[bold]{total_warnings}[/bold] warnings, [bold]{total_info}[/bold] info"
        )

        return 1 if total_invalid > 0 else 0

    def report_json(self, results: list[PathValidationResult]) -> str:
        """Format results as JSON.

        Args:
            results: Results to report

        Returns:
            JSON string representation of results
        """
        data = {
            "paths": [
                {
                    "path": r.path,
                    "path_type": r.path_type.value,
                    "valid": r.is_valid,
                    "warning": r.log.warning,
                    "info": r.log.info if self.show_info else "",
                    "issues": [
                        {
                            "severity": i.severity.value,
                            "rule_id": i.rule_id,
                            "message": i.message,
                        }
                        for i in r.log.issues
                        if self.show_info or i.severity != IssueSeverity.INFO
                    ],
                }
                for r in results
            ]
        }

        return json.dumps(data, indent=2)
