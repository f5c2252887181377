"""Tests for SubjectClassifier."""

import pytest

from cfwatch.classifier import RULES, SubjectClassifier, SubjectRule, match_pattern, short_id
from cfwatch.models import MessageKind


@pytest.fixture
def classifier():
    return SubjectClassifier()


class TestMatchPattern:
    """Tests for match_pattern()."""

    def test_exact(self):
        """Test literal patterns."""
        assert match_pattern(["dea", "stop"], ["dea", "stop"]) == {}
        assert match_pattern(["dea", "stop"], ["dea", "start"]) is None

    def test_capture(self):
        """Test capturing a middle segment."""
        captures = match_pattern(["dea", "<dea>", "start"], ["dea", "42-abc", "start"])
        assert captures == {"dea": "42-abc"}

    def test_length_mismatch(self):
        """Test that extra or missing segments do not match."""
        assert match_pattern(["dea", "<dea>", "start"], ["dea", "start"]) is None
        assert match_pattern(["dea", "stop"], ["dea", "stop", "now"]) is None

    def test_empty_segment(self):
        """Test that an empty segment never matches a wildcard."""
        assert match_pattern(["dea", "*", "start"], ["dea", "", "start"]) is None

    def test_tail_wildcard(self):
        """Test that > matches one or more trailing segments."""
        assert match_pattern(["router", ">"], ["router", "a", "b"]) == {}
        assert match_pattern(["router", ">"], ["router"]) is None


class TestClassify:
    """Tests for SubjectClassifier.classify()."""

    @pytest.mark.parametrize(
        "subject,kind",
        [
            ("droplet.exited", MessageKind.INSTANCE_EXITED),
            ("dea.heartbeat", MessageKind.HEARTBEAT),
            ("dea.advertise", MessageKind.ADVERTISE),
            ("router.register", MessageKind.ROUTE_REGISTERED),
            ("router.unregister", MessageKind.ROUTE_UNREGISTERED),
            ("dea.7-abc123.start", MessageKind.INSTANCE_START),
            ("droplet.updated", MessageKind.DROPLET_UPDATED),
            ("dea.stop", MessageKind.INSTANCE_STOP),
            ("dea.update", MessageKind.INSTANCE_UPDATE),
            ("dea.find.droplet", MessageKind.DROPLET_QUERY),
            ("healthmanager.status", MessageKind.HEALTH_QUERY),
        ],
    )
    def test_known_subjects(self, classifier, subject, kind):
        """Test every known subject maps to its kind."""
        assert classifier.classify(subject).kind == kind

    def test_unknown_passes_subject_through(self, classifier):
        """Test that unmatched subjects are UNKNOWN and displayed verbatim."""
        result = classifier.classify("some.subject")
        assert result.kind == MessageKind.UNKNOWN
        assert result.display_subject == "some.subject"
        assert result.segments == {}

    def test_start_display_subject(self, classifier):
        """Test that the captured DEA id is shortened in the display subject."""
        result = classifier.classify("dea.42-deadbeef.start")
        assert result.display_subject == "dea.42.start"
        assert result.segments == {"dea": "42-deadbeef"}

    def test_start_pattern_vs_find_droplet(self, classifier):
        """Test that only dea.find.droplet is claimed by the literal rule."""
        assert classifier.classify("dea.find.start").kind == MessageKind.INSTANCE_START
        assert classifier.classify("dea.find.droplet").kind == MessageKind.DROPLET_QUERY

    def test_first_match_wins(self):
        """Test rule order decides between overlapping patterns."""
        classifier = SubjectClassifier(
            [
                SubjectRule("dea.*", MessageKind.INSTANCE_UPDATE),
                SubjectRule("dea.stop", MessageKind.INSTANCE_STOP),
            ]
        )
        assert classifier.classify("dea.stop").kind == MessageKind.INSTANCE_UPDATE

    def test_custom_rules_extend_without_code_changes(self):
        """Test adding a rule to the table classifies a new subject."""
        rules = RULES + [SubjectRule("staging.<dea>.done", MessageKind.DROPLET_UPDATED)]
        result = SubjectClassifier(rules).classify("staging.3-ff.done")
        assert result.kind == MessageKind.DROPLET_UPDATED
        assert result.display_subject == "staging.3-ff.done"

    def test_rules_are_copied(self, classifier):
        """Test that the rules property is a copy."""
        classifier.rules.clear()
        assert classifier.classify("dea.stop").kind == MessageKind.INSTANCE_STOP


class TestShortId:
    """Tests for short_id()."""

    def test_short_id(self):
        assert short_id("1-4b293b726167fbc895af5a7927c0973a") == "1"
        assert short_id("42") == "42"
        assert short_id(7) == "7"
