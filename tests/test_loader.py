import json

import pytest

from automata_utils import DFA, NFA, EpsilonNFA, LoaderError, OrderedSet, State, Symbol, Transition
from automata_utils import loader


def test_from_json_file_guesses_kind(load):
    assert isinstance(load("DFA1"), DFA)
    assert isinstance(load("NFA1"), NFA)
    assert isinstance(load("NFA1e"), EpsilonNFA)


def test_from_json_matches_from_json_file(fixture_path):
    with open(fixture_path("DFA1"), encoding="utf-8") as f:
        text = f.read()
    assert loader.from_json(text) == loader.from_json_file(fixture_path("DFA1"))
    assert loader.from_dict(json.loads(text)) == loader.from_json(text)


def test_force_kind(load):
    nfae = load("NFA1", kind="nfae")
    assert isinstance(nfae, EpsilonNFA)
    assert nfae.epsilon == Symbol("ε")
    assert nfae.accept("aabb")


def test_unknown_kind():
    with pytest.raises(ValueError):
        loader.from_dict({"start": "q", "ends": [], "delta": []}, kind="pda")


def test_states_and_alphabet_are_completed():
    dfa = loader.from_dict(
        {
            "ends": ["f"],
            "start": "s",
            "delta": [{"state": "s", "symbol": "a", "image": "t"}],
        }
    )
    assert dfa.states == OrderedSet([State("s"), State("t"), State("f")])
    assert dfa.alphabet == OrderedSet([Symbol("a")])


def test_declared_states_are_kept():
    dfa = loader.from_dict(
        {
            "states": ["s", "unused"],
            "alphabet": ["a", "b"],
            "ends": [],
            "start": "s",
            "delta": [],
        }
    )
    assert State("unused") in dfa.states
    assert Symbol("b") in dfa.alphabet


def test_repeated_nfa_transitions_are_merged():
    nfa = loader.from_dict(
        {
            "starts": ["s"],
            "ends": ["t"],
            "delta": [
                {"state": "s", "symbol": "a", "images": ["s"]},
                {"state": "s", "symbol": "a", "images": ["t"]},
            ],
        }
    )
    assert nfa.delta[Transition(Symbol("a"), State("s"))] == OrderedSet(
        [State("s"), State("t")]
    )


@pytest.mark.parametrize(
    "description,path",
    [
        ([], ""),
        ({"ends": [], "delta": []}, ""),
        ({"start": "s", "starts": ["s"], "ends": [], "delta": []}, ""),
        ({"start": "s", "delta": []}, "$"),
        ({"start": 1, "ends": [], "delta": []}, "$.start"),
        ({"start": "s", "ends": "s", "delta": []}, "$.ends"),
        ({"start": "s", "ends": [1], "delta": []}, "$.ends[0]"),
        ({"start": "s", "ends": [], "delta": [{"state": "s", "symbol": "a"}]}, "$.delta[0]"),
        (
            {"starts": ["s"], "ends": [], "delta": [{"state": "s", "symbol": "a", "images": []}]},
            "$.delta[0].images",
        ),
        ({"starts": ["s"], "ends": [], "delta": [], "epsilon": 0}, "$.epsilon"),
        ({"start": "s", "ends": [], "delta": ["s"]}, "$.delta[0]"),
        (
            {
                "start": "s",
                "ends": ["t"],
                "delta": [
                    {"state": "s", "symbol": "a", "image": "t"},
                    {"state": "s", "symbol": "a", "image": "u"},
                ],
            },
            "$.delta[1]",
        ),
    ],
)
def test_malformed(description, path):
    with pytest.raises(LoaderError) as e:
        loader.from_dict(description)
    assert e.value.path == path


def test_invalid_json():
    with pytest.raises(LoaderError):
        loader.from_json("{")


def test_loader_error_is_value_error():
    with pytest.raises(ValueError):
        loader.from_json("[]")


def test_record_that_is_not_an_object():
    with pytest.raises(LoaderError, match="Expected an object"):
        loader.from_dict({"start": "s", "ends": [], "delta": [["s", "a", "t"]]})


def test_nondeterministic_dfa_record():
    description = {
        "start": "s",
        "ends": ["t"],
        "delta": [
            {"state": "s", "symbol": "a", "image": "t"},
            {"state": "s", "symbol": "a", "image": "u"},
        ],
    }
    with pytest.raises(LoaderError, match="Duplicate transition"):
        loader.from_dict(description)


def test_repeated_dfa_record_is_accepted():
    dfa = loader.from_dict(
        {
            "start": "s",
            "ends": ["t"],
            "delta": [
                {"state": "s", "symbol": "a", "image": "t"},
                {"state": "s", "symbol": "a", "image": "t"},
            ],
        }
    )
    assert len(dfa.delta) == 1
    assert dfa.accept("a")
