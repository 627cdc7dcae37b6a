import pandas as pd

from domain.checklist import first_by_key, sort_by_key


def test_first_by_key_keeps_first_occurrence_in_input_order() -> None:
    df = pd.DataFrame({"k": ["b", "a", "b", "c", "a"], "v": [1, 2, 3, 4, 5]})

    out = first_by_key(df, "k")

    assert list(out["k"]) == ["b", "a", "c"]
    assert list(out["v"]) == [1, 2, 4]


def test_sort_by_key_is_stable() -> None:
    df = pd.DataFrame({"k": ["b", "a", "b", "a"], "v": [1, 2, 3, 4]})

    out = sort_by_key(df, "k")

    assert list(out["k"]) == ["a", "a", "b", "b"]
    assert list(out["v"]) == [2, 4, 1, 3]
    assert list(out.index) == [0, 1, 2, 3]
