# Tests for listing serialization and page rendering.
# Created: 2026-10-19

import json

import pytest
from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from dirbrowse.api.schemas.files import PARENT_ENTRY, Entry, EntryKind
from dirbrowse.rendering import create_templates, render_listing, serialize_entries


def _decode(payload: str) -> list[dict]:
    # Undo the string-literal escaping, then parse the JSON it wraps.
    return json.loads(json.loads('"' + payload + '"'))


def _request(path: str = "/files/docs/") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "root_path": "",
            "scheme": "http",
            "server": ("testserver", 80),
            "query_string": b"",
            "headers": [],
        }
    )


class TestSerializeEntries:
    def test_parent_entry_payload(self):
        payload = serialize_entries([PARENT_ENTRY])
        assert payload == (
            '[{\\"name\\":\\"..\\",\\"url\\":\\"..\\",'
            '\\"last_modified\\":\\"\\",\\"size\\":\\"\\",\\"type\\":\\"folder-back\\"}]'
        )

    def test_empty_listing(self):
        assert serialize_entries([]) == "[]"

    def test_uses_type_key_for_kind(self):
        entry = Entry(name="a.mp4", url="a.mp4", size="1 Byte", kind=EntryKind.MEDIA)
        decoded = _decode(serialize_entries([entry]))
        assert decoded[0]["type"] == "media"
        assert "kind" not in decoded[0]

    def test_every_quote_is_escaped(self):
        entry = Entry(name='say "hi".txt', url="x", kind=EntryKind.FILE)
        payload = serialize_entries([entry])
        for index, char in enumerate(payload):
            if char == '"':
                assert payload[index - 1] == "\\"

    def test_awkward_names_survive(self):
        names = ['say "hi".txt', "back\\slash.txt", "</script><b>&amp;.txt", "ünïcødé.txt"]
        entries = [Entry(name=name, url="x", kind=EntryKind.FILE) for name in names]
        payload = serialize_entries(entries)

        assert "<" not in payload
        assert ">" not in payload
        assert [e["name"] for e in _decode(payload)] == names

    def test_order_is_preserved(self):
        entries = [
            PARENT_ENTRY,
            Entry(name="b/", url="b/", kind=EntryKind.FOLDER),
            Entry(name="a.txt", url="a.txt", kind=EntryKind.FILE),
        ]
        assert [e["name"] for e in _decode(serialize_entries(entries))] == ["..", "b/", "a.txt"]


class TestRenderListing:
    def test_renders_payload_into_page(self):
        response = render_listing(create_templates(), _request(), [PARENT_ENTRY])
        body = response.body.decode()
        assert response.status_code == 200
        assert response.media_type == "text/html"
        assert serialize_entries([PARENT_ENTRY]) in body
        assert "/static/script.js" in body

    def test_payload_is_not_html_escaped(self):
        body = render_listing(create_templates(), _request(), [PARENT_ENTRY]).body.decode()
        assert "&#34;" not in body

    def test_missing_template_raises(self, tmp_path):
        templates = Jinja2Templates(directory=str(tmp_path))
        with pytest.raises(TemplateError):
            render_listing(templates, _request(), [])
