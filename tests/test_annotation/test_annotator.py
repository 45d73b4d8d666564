"""Tests for document-level annotation."""

from link_colors.annotation.annotator import annotate_files, build_annotations, summarize
from link_colors.config import Settings
from link_colors.core.colors import ColorSession
from link_colors.core.styles import underline_for_color
from link_colors.scanning.tokens import Role


def texts(document, annotations):
    return [document[a.span_start:a.span_end] for a in annotations]


class TestBuildAnnotations:
    """Tests for build_annotations function."""

    def test_sample_document(self, sample_document, settings, session):
        annotations = build_annotations(sample_document, settings, True, session)
        assert texts(sample_document, annotations) == [
            "Project Alpha",
            "Project Alpha",
            "the alpha",
            "Char - Pamela",
            "Data Science",
            "Unterminated link",
        ]
        assert annotations[0].color == annotations[1].color == annotations[2].color
        assert annotations[2].role == Role.ALIAS

    def test_prefix_shares_color_with_bare_name(self, settings, session):
        doc = "[[Char - Pamela]] [[Pamela]]"
        first, second = build_annotations(doc, settings, True, session)
        assert first.color == second.color

    def test_visible_ranges(self, settings, session):
        doc = "[[Alpha]]\n[[Beta]]\n[[Gamma]]"
        beta_start = doc.index("[[Beta")
        gamma_start = doc.index("[[Gamma")
        annotations = build_annotations(
            doc, settings, True, session,
            ranges=[(0, beta_start), (gamma_start, len(doc))],
        )
        assert texts(doc, annotations) == ["Alpha", "Gamma"]

    def test_open_link_abandoned_at_hidden_newline(self, settings, session):
        doc = "[[Unterminated link\nfolded line\nUnrelated paragraph"
        annotations = build_annotations(
            doc, settings, True, session,
            ranges=[(0, 19), (32, 51)],
        )
        assert texts(doc, annotations) == ["Unterminated link"]

    def test_open_link_continues_across_hidden_inline_text(self, settings, session):
        doc = "[[Project Alpha]]"
        annotations = build_annotations(
            doc, settings, True, session,
            ranges=[(0, 9), (10, 15)],
        )
        assert texts(doc, annotations) == ["Project", "Alpha"]
        assert all(a.role == Role.TARGET for a in annotations)

    def test_rebuild_is_stable(self, sample_document, settings, session):
        first = build_annotations(sample_document, settings, True, session)
        second = build_annotations(sample_document, settings, True, session)
        assert first == second

    def test_underline_variants(self, settings, session):
        underlined = Settings(underline_variants=True)
        annotations = build_annotations("[[Alpha|a]]", underlined, True, session)
        assert all(a.underline is not None for a in annotations)
        assert annotations[0].underline == underline_for_color(annotations[0].color)

    def test_no_underline_by_default(self, settings, session):
        annotations = build_annotations("[[Alpha]]", settings, True, session)
        assert annotations[0].underline is None


class TestAnnotateFiles:
    """Tests for annotate_files function."""

    def test_shared_session_across_files(self, sample_notes, settings):
        session = ColorSession()
        results = annotate_files(sample_notes, settings, True, session)
        first, second = sample_notes
        assert results[first][0].color == results[second][0].color

    def test_unreadable_file_skipped(self, sample_notes, settings, temp_output_dir):
        missing = temp_output_dir / "missing.md"
        results = annotate_files([missing, *sample_notes], settings, True)
        assert missing not in results
        assert len(results) == 2

    def test_summary(self, sample_notes, settings):
        session = ColorSession()
        results = annotate_files(sample_notes, settings, True, session)
        summary = summarize(results, session, settings, True)
        assert summary['files'] == 2
        assert summary['alias_spans'] == 1
        assert summary['target_spans'] == 6
        assert summary['palette'] == 'vibrant'
        assert summary['mode'] == 'dark'
        assert sum(summary['slot_usage']) == len(session)
