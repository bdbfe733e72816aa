"""
Unit tests for the console report formatter.
"""

from pr_inbox.api import InboxReport
from pr_inbox.formatting.console import ConsoleReportFormatter, short_body
from pr_inbox.review.classifier import InteractionClassifier


LONG_REPLY = (
    "addressed your comment, please re-review now please take a look "
    "thanks very much for your time today"
)


class TestShortBody:
    """Tests for snippet truncation."""

    def test_exactly_limit_is_verbatim(self):
        body = "x" * 100
        assert short_body(body) == body

    def test_one_over_limit_is_truncated(self):
        body = "y" * 100 + "z"
        assert short_body(body) == "y" * 100 + "..."

    def test_short_body_is_verbatim(self):
        assert short_body("looks fine") == "looks fine"

    def test_custom_limit(self):
        assert short_body("abcdef", limit=3) == "abc..."


class TestConsoleReportFormatter:
    """Tests for ConsoleReportFormatter."""

    def test_authored_lines(self):
        formatter = ConsoleReportFormatter()

        lines = formatter.format_authored([(11, "https://github.com/acme/widgets/pull/11")])

        assert lines == ["#11, https://github.com/acme/widgets/pull/11"]

    def test_awaiting_line_with_snippet(self, make_pr, review, comment):
        pr = make_pr(
            10, "alice", title="Fix widget sizing",
            reviews=[review("bob", 1, "looks fine")],
            comments=[comment("alice", 2, LONG_REPLY + " again")],
        )
        result = InteractionClassifier("bob").classify(pr)

        lines = ConsoleReportFormatter().format_engaged(result)

        assert lines[0] == "⚠️ #10 -- Fix widget sizing -- https://github.com/acme/widgets/pull/10"
        assert lines[1] == "\talice - " + (LONG_REPLY + " again")[:100] + "..."

    def test_responded_line_with_verbatim_snippet(self, make_pr, review, comment):
        pr = make_pr(
            10, "alice", title="Fix widget sizing",
            reviews=[review("bob", 2, "looks fine")],
            comments=[comment("alice", 1, LONG_REPLY)],
        )
        result = InteractionClassifier("bob").classify(pr)

        lines = ConsoleReportFormatter().format_engaged(result)

        assert lines == [
            "✅ #10 -- Fix widget sizing -- https://github.com/acme/widgets/pull/10",
            "\tbob - looks fine",
        ]

    def test_no_snippet_without_body(self, make_pr, user_request):
        pr = make_pr(10, "alice", review_requests=[user_request("bob")])
        result = InteractionClassifier("bob").classify(pr)

        lines = ConsoleReportFormatter().format_engaged(result)

        assert len(lines) == 1
        assert lines[0].startswith("✅ #10 -- ")

    def test_full_report_layout(self, make_pr, comment):
        classifier = InteractionClassifier("bob")
        prs = [make_pr(11, "bob"), make_pr(10, "alice", comments=[comment("bob", 1, "hi")])]
        report = InboxReport(
            description="Widgets service",
            authored=classifier.list_authored(prs),
            engaged=classifier.classify_all(prs),
        )

        output = ConsoleReportFormatter().render(report)

        assert output == (
            "Widgets service\n"
            "My PRs\n"
            "\n"
            "#11, https://github.com/acme/widgets/pull/11\n"
            "\n"
            "PRs engaged with\n"
            "\n"
            "✅ #10 -- Change number 10 -- https://github.com/acme/widgets/pull/10\n"
            "\tbob - hi\n"
        )

    def test_snippet_length_setting(self, make_pr, comment):
        pr = make_pr(10, "alice", comments=[comment("bob", 1, "a fairly long note")])
        result = InteractionClassifier("bob").classify(pr)

        lines = ConsoleReportFormatter(snippet_length=6).format_engaged(result)

        assert lines[1] == "\tbob - a fair..."
