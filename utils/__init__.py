# Utility modules for the Transifex Stats plugin
from .sanitizer import (
    strip_all_tags, sanitize_text_field, sanitize_password, sanitize_checkbox
)
