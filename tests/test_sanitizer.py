"""Tests for the settings form sanitizers."""

from utils.sanitizer import (
    strip_all_tags, sanitize_text_field, sanitize_password, sanitize_checkbox
)


def test_text_field_trims_whitespace():
    assert sanitize_text_field('  admin  ') == 'admin'


def test_text_field_none_is_empty():
    assert sanitize_text_field(None) == ''


def test_text_field_strips_tags():
    assert sanitize_text_field('<b>admin</b>') == 'admin'
    assert sanitize_text_field('ad<script>alert(1)</script>min') == 'admin'


def test_text_field_collapses_whitespace():
    assert sanitize_text_field('first\tsecond\n third') == 'first second third'


def test_text_field_removes_control_chars():
    assert sanitize_text_field('ad\x00mi\x07n') == 'admin'


def test_text_field_removes_percent_octets():
    assert sanitize_text_field('user%3Cname') == 'username'
    assert sanitize_text_field('a%%3C3Cb') == 'ab'


def test_text_field_keeps_plain_ampersand():
    assert sanitize_text_field('Tom & Jerry') == 'Tom & Jerry'


def test_text_field_truncates():
    assert sanitize_text_field('x' * 300, max_length=10) == 'x' * 10


def test_strip_all_tags_drops_style_body():
    assert strip_all_tags('<style>p {}</style><p>text</p>') == 'text'


def test_password_keeps_markup_characters():
    assert sanitize_password('  p<ss>&w%3Crd  ') == 'p<ss>&w%3Crd'


def test_password_removes_control_chars():
    assert sanitize_password('sec\x00ret') == 'secret'


def test_password_none_is_empty():
    assert sanitize_password(None) == ''


def test_checkbox_presence_means_true():
    assert sanitize_checkbox({'showcode': ''}, 'showcode') is True
    assert sanitize_checkbox({'showcode': 'false'}, 'showcode') is True
    assert sanitize_checkbox({}, 'showcode') is False


def test_text_field_drops_markup_hidden_in_entities():
    assert sanitize_text_field('<b>&lt;script&gt;x</b>') == 'x'
    assert sanitize_text_field('&lt;script&gt;alert(1)&lt;/script&gt;') == 'alert(1)'


def test_text_field_decodes_entities_with_or_without_tags():
    assert sanitize_text_field('Tom &amp; Jerry') == 'Tom & Jerry'
    assert sanitize_text_field('<b>Tom &amp; Jerry</b>') == 'Tom & Jerry'


def test_password_is_not_truncated():
    password = 'p' * 250
    assert sanitize_password(password) == password
