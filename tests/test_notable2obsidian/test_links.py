"""Unit tests for notable2obsidian.links."""

import pytest

from notable2obsidian.links import (
    ATTACHMENT,
    NOTE,
    LinkRewrite,
    apply_link_rewrites,
    find_link_rewrites,
    note_link_target,
    rewrite_links,
)

# ---------------------------------------------------------------------------
# Internal note links
# ---------------------------------------------------------------------------


class TestNoteLinks:
    def test_link_with_display_title(self):
        text, _ = rewrite_links("See [My Note](@note/sub/page.md) here.", note_dir="notes")
        assert text == "See [[notes/page\\|My Note]] here."

    def test_title_dropped_when_equal_to_target(self):
        text, _ = rewrite_links("[page](@note/page.md)")
        assert text == "[[page]]"

    def test_title_kept_when_only_basename_matches(self):
        text, _ = rewrite_links("[page](@note/page.md)", note_dir="Work")
        assert text == "[[Work/page\\|page]]"

    def test_target_uses_current_note_directory(self):
        # The referenced note's own folder is ignored
        text, _ = rewrite_links("[Other](@note/far/away/other.md)", note_dir="Work/Projects")
        assert text == "[[Work/Projects/other\\|Other]]"

    def test_repeated_link_rewritten_everywhere(self):
        text, rewrites = rewrite_links("[A](@note/a.md) and [A](@note/a.md)")
        assert text == "[[a\\|A]] and [[a\\|A]]"
        assert len(rewrites) == 2

    def test_non_markdown_note_not_matched(self):
        body = "[A](@note/a.txt)"
        assert rewrite_links(body) == (body, [])

    def test_punctuation_in_text_not_matched(self):
        body = "[Hello, world!](@note/hello.md)"
        assert rewrite_links(body)[0] == body


# ---------------------------------------------------------------------------
# Attachment references
# ---------------------------------------------------------------------------


class TestAttachmentLinks:
    def test_attachment_verbatim(self):
        text, rewrites = rewrite_links("![](@attachment/img/photo.png)")
        assert text == "![[attachments/img/photo.png]]"
        assert rewrites[0].kind == ATTACHMENT

    def test_plain_attachment(self):
        assert rewrite_links("[](@attachment/img/photo.png)")[0] == "[[attachments/img/photo.png]]"

    def test_custom_attachments_dir(self):
        text, _ = rewrite_links("[](@attachment/doc.pdf)", attachments_dir="files")
        assert text == "[[files/doc.pdf]]"

    def test_attachment_ignores_note_dir(self):
        text, _ = rewrite_links("[](@attachment/doc.pdf)", note_dir="Work")
        assert text == "[[attachments/doc.pdf]]"


# ---------------------------------------------------------------------------
# find / apply
# ---------------------------------------------------------------------------


class TestFindAndApply:
    def test_plain_text_untouched(self):
        body = "No links [here](https://example.com)."
        assert find_link_rewrites(body) == []
        assert apply_link_rewrites(body, []) == body

    def test_offsets_point_at_original_text(self):
        body = "x [N](@note/n.md) y [](@attachment/a.png) z"
        rewrites = find_link_rewrites(body)
        assert [r.kind for r in rewrites] == [NOTE, ATTACHMENT]
        for rw in rewrites:
            assert body[rw.start : rw.end] == rw.original

    def test_apply_is_order_independent(self):
        body = "[N](@note/n.md) [](@attachment/a.png)"
        rewrites = find_link_rewrites(body)
        assert apply_link_rewrites(body, list(reversed(rewrites))) == apply_link_rewrites(body, rewrites)

    def test_overlap_rejected(self):
        body = "abcdef"
        overlapping = [
            LinkRewrite(NOTE, 0, 4, "abcd", "X"),
            LinkRewrite(NOTE, 2, 6, "cdef", "Y"),
        ]
        with pytest.raises(ValueError):
            apply_link_rewrites(body, overlapping)

    def test_replacement_not_rescanned(self):
        # A display title that looks like a link must not be rewritten again
        body = "[note](@note/note.md)"
        text, rewrites = rewrite_links(body, note_dir="d")
        assert text == "[[d/note\\|note]]"
        assert len(rewrites) == 1


# ---------------------------------------------------------------------------
# note_link_target
# ---------------------------------------------------------------------------


class TestNoteLinkTarget:
    @pytest.mark.parametrize(
        "note_dir, reference, expected",
        [
            ("", "page", "page"),
            ("notes", "sub/page", "notes/page"),
            ("a/b", "x/y/z", "a/b/z"),
            ("", "double.md", "double"),
        ],
    )
    def test_parametrized(self, note_dir, reference, expected):
        assert note_link_target(note_dir, reference) == expected
