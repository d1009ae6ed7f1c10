"""Test data factories for translator testing.

Provides deterministic builders for:
- TranslationCatalog
- InMemoryTranslator
- YAML catalog files
- compiled gettext .mo files
"""

import struct
from pathlib import Path
from typing import Dict, Optional

import yaml

from translator_contract.i18n import (
    CatalogBuilder,
    InMemoryTranslator,
    PluralRule,
    TranslationCatalog,
)


def make_translation_catalog(
    domain: str = "shop",
    locale: str = "en-US",
    plural_rule: Optional[PluralRule] = None,
) -> TranslationCatalog:
    """Create a catalog holding the "Save" scenario entries.

    Entries:
        ("Save", "new-comment") -> "Create comment"
        ("Save", "edit-comment") -> "Edit comment"
        ("Cancel", None) -> ""
        ("Save item", None) -> ["Save item", "Save items"]
        ("Save item", "admin") -> ["Store entry", "Store entries"]
    """
    builder = CatalogBuilder(domain, locale, plural_rule=plural_rule)
    builder.add_message("Save", "Create comment", context="new-comment")
    builder.add_message("Save", "Edit comment", context="edit-comment")
    builder.add_message("Cancel", "")
    builder.add_plural("Save item", ["Save item", "Save items"])
    builder.add_plural("Save item", ["Store entry", "Store entries"], context="admin")
    return builder.build(loaded_at="2024-01-01T00:00:00Z")


def make_in_memory_translator(domain: str = "shop") -> InMemoryTranslator:
    """Create an InMemoryTranslator with the same entries as make_translation_catalog."""
    return InMemoryTranslator(
        domain,
        messages={
            ("Save", "new-comment"): "Create comment",
            ("Save", "edit-comment"): "Edit comment",
            "Cancel": "",
        },
        plurals={
            "Save item": ["Save item", "Save items"],
            ("Save item", "admin"): ["Store entry", "Store entries"],
        },
    )


def write_yaml_catalog(
    directory: Path,
    domain: str,
    locale: str,
    entries: list,
    plural_forms: Optional[str] = None,
) -> Path:
    """Write ``<domain>.<locale>.yml`` and return its path."""
    data: Dict[str, object] = {"messages": entries}
    if plural_forms:
        data["plural_forms"] = plural_forms
    path = Path(directory) / f"{domain}.{locale}.yml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)
    return path


def build_mo(
    entries: Dict[str, str],
    plural_forms: str = "nplurals=2; plural=(n != 1);",
) -> bytes:
    """Build a little-endian gettext .mo file.

    Keys follow the .mo conventions: ``"ctx\\x04msgid"`` for contexts and
    ``"singular\\x00plural"`` for plural entries, whose values join forms
    with ``"\\x00"``.
    """
    header = (
        "Content-Type: text/plain; charset=UTF-8\n"
        f"Plural-Forms: {plural_forms}\n"
    )
    catalog = {"": header, **entries}
    keys = sorted(catalog)

    ids = b""
    strs = b""
    offsets = []
    for key in keys:
        key_bytes = key.encode("utf-8")
        value_bytes = catalog[key].encode("utf-8")
        offsets.append((len(ids), len(key_bytes), len(strs), len(value_bytes)))
        ids += key_bytes + b"\0"
        strs += value_bytes + b"\0"

    header_size = 7 * 4
    key_start = header_size + 16 * len(keys)
    value_start = key_start + len(ids)

    key_table = b""
    value_table = b""
    for id_offset, id_length, str_offset, str_length in offsets:
        key_table += struct.pack("<ii", id_length, id_offset + key_start)
        value_table += struct.pack("<ii", str_length, str_offset + value_start)

    output = struct.pack(
        "<Iiiiiii",
        0x950412DE,
        0,
        len(keys),
        header_size,
        header_size + 8 * len(keys),
        0,
        0,
    )
    return output + key_table + value_table + ids + strs


def write_mo_catalog(
    localedir: Path,
    domain: str,
    locale: str,
    entries: Dict[str, str],
    plural_forms: str = "nplurals=2; plural=(n != 1);",
) -> Path:
    """Write ``<localedir>/<locale>/LC_MESSAGES/<domain>.mo`` and return its path."""
    messages_dir = Path(localedir) / locale.replace("-", "_") / "LC_MESSAGES"
    messages_dir.mkdir(parents=True, exist_ok=True)
    path = messages_dir / f"{domain}.mo"
    path.write_bytes(build_mo(entries, plural_forms))
    return path
