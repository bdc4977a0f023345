from interface.constants import INPUT_LIMIT_PROJECT, INPUT_LIMIT_TAG, INPUT_LIMIT_TASK, LANG_PACK


def test_constants_values_present():
    assert (INPUT_LIMIT_TAG, INPUT_LIMIT_PROJECT, INPUT_LIMIT_TASK) == (15, 20, 150)
    assert "en" in LANG_PACK and "ru" in LANG_PACK
    assert LANG_PACK["en"]["EMPTY_PROJECTS"] == "No projects created yet."
    assert "{action}" in LANG_PACK["en"]["CONFIRM_BODY"]


def test_ru_pack_backfilled_from_en():
    import interface.i18n  # noqa: F401  (fills defaults on import)

    assert set(LANG_PACK["en"]) <= set(LANG_PACK["ru"])
