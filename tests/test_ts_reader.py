import pytest

from tscat.core.errors import CatalogueError, CatalogueFormatError, CatalogueParseError
from tscat.infra.models import Location, Status
from tscat.infra.ts_reader import parse_catalogue, read_catalogue


class TestPackagedCatalogue:
    def test_contexts_in_document_order(self, hu_catalogue):
        assert hu_catalogue.context_names() == (
            "BookmarkEditor",
            "BookmarkManager",
            "BrowserConfig",
            "MythBrowser",
            "WebPage",
        )

    def test_root_attributes(self, hu_catalogue):
        assert hu_catalogue.version == "1.1"
        assert hu_catalogue.language == ""

    def test_all_messages_unfinished_and_empty(self, hu_catalogue):
        for _ctx, msg in hu_catalogue.messages():
            assert msg.status is Status.UNFINISHED
            assert msg.translation == ""

    def test_sources_are_non_empty(self, hu_catalogue):
        assert all(msg.source for _ctx, msg in hu_catalogue.messages())

    def test_webpage_has_single_loading_message(self, hu_catalogue):
        ctx = hu_catalogue.context("WebPage")
        assert ctx is not None
        assert [m.source for m in ctx] == ["Loading..."]

    def test_entities_decoded_and_newlines_kept(self, hu_catalogue):
        ctx = hu_catalogue.context("BookmarkManager")
        first = ctx.messages[0]
        assert first.source == (
            "No bookmarks defined.\n\n"
            "Use the 'Add Bookmark' menu option to add new bookmarks"
        )

    def test_placeholders_kept_verbatim(self, hu_catalogue):
        ctx = hu_catalogue.context("BrowserConfig")
        texts = [m.source for m in ctx if "%ZOOM%" in m.source]
        assert len(texts) == 1
        assert "%ZOOM% and %URL% will be replaced" in texts[0]
        assert "Use 'Internal' to use the built in web browser'." in texts[0]

    def test_locations(self, hu_catalogue):
        msg = hu_catalogue.context("BookmarkEditor").messages[0]
        assert msg.locations == (Location("../mythbrowser/bookmarkeditor.cpp", 56),)

    def test_message_counts(self, hu_catalogue):
        counts = {ctx.name: len(ctx) for ctx in hu_catalogue.contexts}
        assert counts == {
            "BookmarkEditor": 6,
            "BookmarkManager": 12,
            "BrowserConfig": 7,
            "MythBrowser": 11,
            "WebPage": 1,
        }


class TestSampleDocument:
    def test_statuses(self, sample_catalogue):
        ctx = sample_catalogue.context("BrowserConfig")
        statuses = {(m.source, m.comment): m.status for m in ctx}
        assert statuses[("Ok", "")] is Status.FINISHED
        assert statuses[("Cancel", "")] is Status.UNFINISHED
        assert statuses[("Old entry", "")] is Status.OBSOLETE

    def test_comments(self, sample_catalogue):
        msg = sample_catalogue.context("WebPage").messages[0]
        assert msg.extracomment == "Shown in the tab title"
        assert msg.translatorcomment == "Keep it short"
        assert msg.translation == "Lädt..."

    def test_language_attributes(self, sample_catalogue):
        assert sample_catalogue.language == "de_DE"
        assert sample_catalogue.source_language == "en"

    def test_missing_translation_element_is_unfinished(self):
        cat = parse_catalogue(
            "<TS version='2.1'><context><name>C</name>"
            "<message><source>Hi</source></message></context></TS>"
        )
        msg = cat.context("C").messages[0]
        assert msg.status is Status.UNFINISHED
        assert msg.translation == ""


class TestErrors:
    def test_malformed_markup(self):
        with pytest.raises(CatalogueParseError) as exc_info:
            parse_catalogue("<TS><context><name>C</name></TS>", path="broken.ts")
        assert exc_info.value.line == 1
        assert "broken.ts" in str(exc_info.value)

    def test_wrong_root(self):
        with pytest.raises(CatalogueFormatError):
            parse_catalogue("<xliff/>")

    def test_context_without_name(self):
        with pytest.raises(CatalogueFormatError):
            parse_catalogue("<TS><context><message><source>x</source></message></context></TS>")

    def test_empty_source_rejected(self):
        with pytest.raises(CatalogueFormatError):
            parse_catalogue("<TS><context><name>C</name><message><source></source></message></context></TS>")

    def test_unknown_translation_type(self):
        with pytest.raises(CatalogueFormatError):
            parse_catalogue(
                "<TS><context><name>C</name><message><source>x</source>"
                "<translation type='bogus'/></message></context></TS>"
            )

    def test_bad_location_line(self):
        with pytest.raises(CatalogueFormatError):
            parse_catalogue(
                "<TS><context><name>C</name><message><location filename='a' line='x'/>"
                "<source>x</source></message></context></TS>"
            )

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogueError):
            read_catalogue(tmp_path / "nope.ts")


class TestPluralEntries:
    def test_forms_read_from_numerusform_children(self, numerus_catalogue):
        msg = numerus_catalogue.context("MythBrowser").messages[0]
        assert msg.numerus is True
        assert msg.numerus_forms == ("%n könyvjelző",)
        assert msg.translation == ""
        assert msg.status is Status.FINISHED

    def test_unfinished_plural(self, numerus_catalogue):
        msg = numerus_catalogue.context("MythBrowser").messages[1]
        assert msg.status is Status.UNFINISHED
        assert msg.numerus_forms == ("",)
        assert not msg.has_text
