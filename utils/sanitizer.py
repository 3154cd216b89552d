"""
Input Sanitization Module

Cleans values submitted through the settings form before they are stored.
"""

import re

from bs4 import BeautifulSoup

# Control characters (C0 and C1), excluding the whitespace handled separately
CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')

# Any run of line breaks, tabs and spaces
WHITESPACE_RUN = re.compile(r'[\r\n\t ]+')

# Percent-encoded octets such as %3C
PERCENT_OCTET = re.compile(r'%[a-fA-F0-9]{2}')

# Tag-like text left over once entities such as &lt;b&gt; are decoded
TAG_LIKE = re.compile(r'<[^>]*>')


def strip_all_tags(text):
    """
    Remove every HTML tag from text, dropping script and style bodies.

    Args:
        text: Markup or plain text

    Returns:
        The text content with all markup removed
    """
    soup = BeautifulSoup(text, 'html.parser')
    for element in soup(['script', 'style']):
        element.decompose()
    return soup.get_text()


def sanitize_text_field(text, max_length=200):
    """
    Sanitize a single-line free text value.

    Drops markup, control characters and percent-encoded octets,
    collapses whitespace to single spaces and trims the result.

    Args:
        text: The submitted value (can be None)
        max_length: Maximum allowed length (default 200)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Markup and entities both go through the parser, so &amp; decodes
    # the same way with or without a surrounding tag
    if '<' in text or '&' in text:
        text = strip_all_tags(text)
        while True:
            stripped = TAG_LIKE.sub('', text)
            if stripped == text:
                break
            text = stripped

    text = CONTROL_CHARS.sub('', text)
    text = WHITESPACE_RUN.sub(' ', text)

    # Removing one octet can expose another, e.g. %%3C3C
    while True:
        stripped = PERCENT_OCTET.sub('', text)
        if stripped == text:
            break
        text = stripped

    text = text.strip()

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_password(password):
    """
    Sanitize a password value.

    Only surrounding whitespace and control characters are removed.
    Markup-like characters (<, >, &, %) are valid password characters
    and are kept as submitted, and the length is not limited.

    Args:
        password: The submitted password (can be None)

    Returns:
        Sanitized password string
    """
    if password is None:
        return ''

    if not isinstance(password, str):
        password = str(password)

    password = CONTROL_CHARS.sub('', password)
    password = password.strip()

    return password


def sanitize_checkbox(form, key):
    """
    Read a checkbox from submitted form data.

    Browsers only submit checked boxes, so presence alone means True
    whatever the submitted value is.

    Args:
        form: Mapping of submitted field names to values
        key: The checkbox field name

    Returns:
        True if the field was submitted, False otherwise
    """
    return key in form
