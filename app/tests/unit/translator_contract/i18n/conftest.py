"""Feature-level fixtures for i18n tests.

Every provider is built over the same entries so the contract tests can run
against each of them.
"""

import pytest

from translator_contract.i18n import (
    CatalogTranslator,
    GettextTranslator,
    InMemoryTranslator,
    PluralRule,
    YAMLCatalogLoader,
)
from tests.factories.translations import (
    make_in_memory_translator,
    make_translation_catalog,
    write_mo_catalog,
    write_yaml_catalog,
)

SCENARIO_YAML_ENTRIES = [
    {"msgid": "Save", "msgctxt": "new-comment", "msgstr": "Create comment"},
    {"msgid": "Save", "msgctxt": "edit-comment", "msgstr": "Edit comment"},
    {"msgid": "Cancel", "msgstr": ""},
    {"msgid": "Save item", "msgstr_plural": ["Save item", "Save items"]},
    {
        "msgid": "Save item",
        "msgctxt": "admin",
        "msgstr_plural": ["Store entry", "Store entries"],
    },
]

SCENARIO_MO_ENTRIES = {
    "new-comment\x04Save": "Create comment",
    "edit-comment\x04Save": "Edit comment",
    "Cancel": "",
    "Save item\x00Save items": "Save item\x00Save items",
    "admin\x04Save item\x00Save items": "Store entry\x00Store entries",
}

POLISH_PLURAL_FORMS = (
    "nplurals=3; plural=(n==1 ? 0 : "
    "n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"
)


@pytest.fixture
def scenario_catalog():
    """TranslationCatalog with the "Save" scenario entries."""
    return make_translation_catalog()


@pytest.fixture
def translations_dir(tmp_path):
    """Directory with YAML catalogs for the "shop" domain.

    - shop.en-US.yml: the scenario entries
    - shop.fr.yml: a french catalog without plural_forms header
    - shop.pl-PL.yml: a polish catalog with three plural forms
    """
    directory = tmp_path / "locales"
    directory.mkdir()
    write_yaml_catalog(directory, "shop", "en-US", SCENARIO_YAML_ENTRIES)
    write_yaml_catalog(
        directory,
        "shop",
        "fr",
        [
            {"msgid": "Save", "msgstr": "Enregistrer"},
            {"msgid": "Save item", "msgstr_plural": ["Article", "Articles"]},
        ],
    )
    write_yaml_catalog(
        directory,
        "shop",
        "pl-PL",
        [{"msgid": "File", "msgstr_plural": ["plik", "pliki", "plików"]}],
        plural_forms=POLISH_PLURAL_FORMS,
    )
    return directory


@pytest.fixture
def yaml_loader(translations_dir):
    """YAMLCatalogLoader over translations_dir without caching."""
    return YAMLCatalogLoader(translations_dir, use_cache=False)


@pytest.fixture
def localedir(tmp_path):
    """Directory with a compiled gettext catalog for shop/en_US."""
    directory = tmp_path / "gettext"
    write_mo_catalog(directory, "shop", "en-US", SCENARIO_MO_ENTRIES)
    return directory


@pytest.fixture(params=["memory", "catalog", "gettext"])
def translator(request, translations_dir, localedir):
    """Each provider, loaded with the scenario entries."""
    if request.param == "memory":
        return make_in_memory_translator()
    if request.param == "catalog":
        return CatalogTranslator(
            YAMLCatalogLoader(translations_dir, use_cache=False), "shop", "en-US"
        )
    return GettextTranslator.from_directory("shop", localedir, "en-US")


@pytest.fixture(params=["memory", "catalog", "gettext"])
def short_plural_translator(request, tmp_path):
    """Each provider with a two-form "File" set under the three-form polish rule."""
    forms = ["plik", "pliki"]
    if request.param == "memory":
        return InMemoryTranslator(
            "shop",
            plurals={"File": forms},
            locale="pl-PL",
            plural_rule=PluralRule.from_header(POLISH_PLURAL_FORMS),
        )
    if request.param == "catalog":
        write_yaml_catalog(
            tmp_path,
            "shop",
            "pl-PL",
            [{"msgid": "File", "msgstr_plural": forms}],
            plural_forms=POLISH_PLURAL_FORMS,
        )
        return CatalogTranslator(
            YAMLCatalogLoader(tmp_path, use_cache=False), "shop", "pl-PL"
        )
    write_mo_catalog(
        tmp_path,
        "shop",
        "pl-PL",
        {"File\x00Files": "\x00".join(forms)},
        plural_forms=POLISH_PLURAL_FORMS,
    )
    return GettextTranslator.from_directory("shop", tmp_path, "pl-PL")
