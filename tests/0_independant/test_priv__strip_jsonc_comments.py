# tests/0_independant/test_priv__strip_jsonc_comments.py
"""Tests for the private _strip_jsonc_comments helper."""

import json

import mockwriter.utils as mod_utils


def test_strips_line_comments() -> None:
    text = '{\n  // indent width\n  "indent": 2, # trailing\n}'
    result = mod_utils._strip_jsonc_comments(text)
    assert "indent width" not in result
    assert "trailing" not in result
    assert '"indent": 2,' in result


def test_strips_block_comments() -> None:
    text = '{ /* multi\n line */ "a": 1 }'
    assert json.loads(mod_utils._strip_jsonc_comments(text)) == {"a": 1}


def test_preserves_comment_markers_inside_strings() -> None:
    text = '{"url": "http://example.com", "tag": "#1", "path": "/*x*/"}'
    assert json.loads(mod_utils._strip_jsonc_comments(text)) == {
        "url": "http://example.com",
        "tag": "#1",
        "path": "/*x*/",
    }


def test_preserves_escaped_quotes() -> None:
    text = '{"q": "say \\"hi\\" // not a comment"} // comment'
    assert json.loads(mod_utils._strip_jsonc_comments(text)) == {
        "q": 'say "hi" // not a comment'
    }


def test_unterminated_block_comment_drops_rest() -> None:
    assert mod_utils._strip_jsonc_comments('{"a": 1} /* open').strip() == '{"a": 1}'
