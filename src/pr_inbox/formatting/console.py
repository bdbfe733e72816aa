"""
Console Report Formatter

Renders the inbox report as plain text lines for the terminal.
"""

from typing import List, Tuple

from ..review.classifier import ClassificationResult


ELLIPSIS = "..."


def short_body(body: str, limit: int = 100) -> str:
    """Cut ``body`` to ``limit`` characters plus an ellipsis when it is longer."""
    if len(body) <= limit:
        return body
    return body[:limit] + ELLIPSIS


class ConsoleReportFormatter:
    """
    Formats the two report sections.

    ``My PRs`` lists authored pull requests; ``PRs engaged with`` lists
    classified pull requests with an optional snippet of the latest message.
    """

    def __init__(self, snippet_length: int = 100):
        self.snippet_length = snippet_length

    def format_authored(self, authored: List[Tuple[int, str]]) -> List[str]:
        return [f"#{number}, {permalink}" for number, permalink in authored]

    def format_engaged(self, result: ClassificationResult) -> List[str]:
        pr = result.pull_request
        lines = [f"{result.status.glyph} #{pr.number} -- {pr.title} -- {pr.permalink}"]
        if result.has_snippet:
            lines.append(f"\t{result.speaker} - {short_body(result.body, self.snippet_length)}")
        return lines

    def format_report(self, report) -> List[str]:
        """
        Format a whole report.

        Args:
            report: InboxReport to render

        Returns:
            Output lines without trailing newlines
        """
        lines = [report.description, "My PRs", ""]
        lines.extend(self.format_authored(report.authored))
        lines.extend(["", "PRs engaged with", ""])
        for result in report.engaged:
            lines.extend(self.format_engaged(result))
        return lines

    def render(self, report) -> str:
        return "\n".join(self.format_report(report)) + "\n"
