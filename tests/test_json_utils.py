from deepseek_adapter.llm.json_utils import merge, merge_inplace


def test_nested_objects_merge_key_by_key():
    base = {"options": {"a": 1, "inner": {"x": 1, "y": 2}}, "keep": True}
    overrides = {"options": {"b": 2, "inner": {"y": 20, "z": 30}}}

    assert merge(base, overrides) == {
        "options": {"a": 1, "b": 2, "inner": {"x": 1, "y": 20, "z": 30}},
        "keep": True,
    }


def test_non_object_override_replaces_wholesale():
    base = {"options": {"a": 1}, "items": [1, 2, 3], "n": 1}

    merged = merge(base, {"options": "flat", "items": [9], "n": None})

    assert merged == {"options": "flat", "items": [9], "n": None}


def test_object_override_replaces_scalar():
    assert merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}


def test_merge_leaves_inputs_untouched():
    base = {"a": {"b": 1}}
    overrides = {"a": {"c": 2}, "d": {"e": 3}}

    merged = merge(base, overrides)
    merged["d"]["e"] = 99

    assert base == {"a": {"b": 1}}
    assert overrides == {"a": {"c": 2}, "d": {"e": 3}}


def test_merge_inplace_mutates_target():
    target = {"a": {"b": 1}}
    merge_inplace(target, {"a": {"c": 2}})
    assert target == {"a": {"b": 1, "c": 2}}
