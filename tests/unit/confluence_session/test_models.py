"""Unit tests for confluence_session.models module."""

import pytest

from src.confluence_session.models import (
    Attachment,
    Page,
    PageSummary,
    PageUpdateOptions,
    ServerInfo,
    Space,
)
from tests.fixtures.remote_structs import (
    ATTACHMENT,
    PAGE,
    PAGE_SUMMARY,
    SERVER_INFO_V3,
    SERVER_INFO_V4,
    SPACE,
)


class TestServerInfo:
    """Test cases for ServerInfo."""

    def test_from_remote_string_values(self):
        info = ServerInfo.from_remote(SERVER_INFO_V3)

        assert info.major_version == 3
        assert info.minor_version == 5
        assert info.patch_level == 13
        assert info.build_id == "2176"
        assert info.development_build is False
        assert info.base_url == "https://wiki.example.com"
        assert info.version_string == "3.5.13"

    def test_from_remote_native_values(self):
        info = ServerInfo.from_remote(SERVER_INFO_V4)

        assert info.major_version == 4
        assert info.development_build is False

    def test_development_build_flag(self):
        info = ServerInfo.from_remote(dict(SERVER_INFO_V3, developmentBuild="true"))
        assert info.development_build is True

    def test_is_frozen(self):
        info = ServerInfo(major_version=4)
        with pytest.raises(AttributeError):
            info.major_version = 3


class TestSpace:
    """Test cases for Space."""

    def test_from_remote(self):
        space = Space.from_remote(SPACE)

        assert space.key == "TEAM"
        assert space.name == "Team Space"
        assert space.home_page == 98305

    def test_missing_home_page(self):
        space = Space.from_remote({"key": "EMPTY"})

        assert space.home_page is None
        assert space.type == "global"


class TestPages:
    """Test cases for PageSummary and Page."""

    def test_summary_from_remote(self):
        summary = PageSummary.from_remote(PAGE_SUMMARY)

        assert summary.id == 123456
        assert summary.space == "TEAM"
        assert summary.parent_id == 98305
        assert summary.title == "Build Results"
        assert summary.locks == 0

    def test_top_level_page_has_no_parent(self):
        summary = PageSummary.from_remote(dict(PAGE_SUMMARY, parentId="0"))
        assert summary.parent_id is None

    def test_page_from_remote(self):
        page = Page.from_remote(PAGE)

        assert page.id == 123456
        assert page.version == 7
        assert page.content == "<p>Latest build: green</p>"
        assert page.home_page is False
        assert page.current is True

    def test_page_is_a_summary(self):
        assert isinstance(Page.from_remote(PAGE), PageSummary)

    def test_new_page_to_remote_omits_unset_fields(self):
        page = Page(space="TEAM", title="New", content="<p>hi</p>")

        assert page.to_remote() == {
            "space": "TEAM",
            "title": "New",
            "content": "<p>hi</p>",
        }

    def test_existing_page_to_remote_stringifies_ids(self):
        page = Page(id=123456, space="TEAM", parent_id=98305, title="T", version=7)
        struct = page.to_remote()

        assert struct["id"] == "123456"
        assert struct["parentId"] == "98305"
        assert struct["version"] == "7"


class TestAttachment:
    """Test cases for Attachment."""

    def test_from_remote(self):
        attachment = Attachment.from_remote(ATTACHMENT)

        assert attachment.id == 5555
        assert attachment.page_id == 123456
        assert attachment.file_name == "report.html"
        assert attachment.file_size == 2048
        assert attachment.comment == "Nightly report"

    def test_upload_struct(self):
        attachment = Attachment(
            page_id=42,
            file_name="a_b.txt",
            file_size=0,
            content_type="text/plain",
            comment="",
        )

        assert attachment.to_remote() == {
            "pageId": "42",
            "fileName": "a_b.txt",
            "fileSize": "0",
            "contentType": "text/plain",
            "comment": "",
        }

    def test_upload_struct_without_name(self):
        attachment = Attachment(page_id=42, file_name=None)
        assert "fileName" not in attachment.to_remote()


class TestPageUpdateOptions:
    """Test cases for PageUpdateOptions."""

    def test_to_remote(self):
        options = PageUpdateOptions(version_comment="CI", minor_edit=True)
        assert options.to_remote() == {"versionComment": "CI", "minorEdit": True}
