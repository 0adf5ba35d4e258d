from api.rows import unique_values


def test_unique_values_flattens_in_first_seen_order():
    rows = [{"popular_tags": ["a", "b"]}, {"popular_tags": ["b", "c"]}]

    assert unique_values(rows, "popular_tags") == ["a", "b", "c"]


def test_unique_values_is_stable_with_many_repeats():
    rows = [{"top_categories": ["music", "sports"]} for _ in range(50)]
    rows.append({"top_categories": ["news", "music"]})

    assert unique_values(rows, "top_categories") == ["music", "sports", "news"]


def test_unique_values_skips_missing_and_non_list_fields():
    rows = [
        {"top_categories": None},
        {},
        {"top_categories": "music"},
        {"top_categories": ["gaming"]},
    ]

    assert unique_values(rows, "top_categories") == ["gaming"]


def test_unique_values_handles_empty_input():
    assert unique_values([], "popular_tags") == []
    assert unique_values(None, "popular_tags") == []
