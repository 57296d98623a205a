"""File-tree icons, as Nerd Font glyphs or plain ASCII tags."""

from pathlib import Path

# kind -> (nerd font glyph, ascii tag)
ICONS = {
    "parent": ("\uf062", "^"),  # nf-fa-arrow_up
    "directory": ("\uf07b", "+"),  # nf-fa-folder
    "molecule": ("\uf0c3", "*"),  # nf-fa-flask
    "table": ("\uf0ce", "#"),  # nf-fa-table
    "text": ("\uf0f6", "="),  # nf-fa-file_text_o
    "code": ("\uf121", "<"),  # nf-fa-code
    "file": ("\uf016", "-"),  # nf-fa-file_o
}

EXTENSION_KINDS = {
    "xyz": "molecule",
    "pdb": "molecule",
    "cif": "molecule",
    "dat": "table",
    "csv": "table",
    "txt": "text",
    "log": "text",
    "rs": "code",
    "py": "code",
    "js": "code",
    "ts": "code",
}


def entry_kind(name, is_dir):
    if is_dir:
        return "parent" if name == ".." else "directory"
    return EXTENSION_KINDS.get(Path(name).suffix.lstrip(".").lower(), "file")


def icon_for(name, is_dir, use_nerd_fonts=True):
    nerd, ascii_tag = ICONS[entry_kind(name, is_dir)]
    return nerd if use_nerd_fonts else ascii_tag
