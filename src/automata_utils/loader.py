"""
Build automata from plain descriptions, as found in JSON files:

    {
        "states": ["q_0", "q_1"],
        "alphabet": ["a", "b"],
        "ends": ["q_0"],
        "start": "q_0",
        "delta": [
            {"state": "q_0", "symbol": "a", "image": "q_1"},
            {"state": "q_1", "symbol": "b", "image": "q_0"}
        ]
    }

A deterministic automaton has a `start` and transitions with an `image`.
A non-deterministic one has `starts` and transitions with a non-empty list
of `images`. An `epsilon` key (or `kind="nfae"`) makes it an EpsilonNFA.

`states` and `alphabet` are optional: every name mentioned in `start(s)`,
`ends` and `delta` is added to them.
"""

import json
import logging

import more_itertools

from automata_utils.dfa import DFA, State, Symbol, Transition
from automata_utils.exceptions import LoaderError
from automata_utils.fsm import FiniteStateMachine
from automata_utils.nfa import NFA, EpsilonNFA
from automata_utils.utils import EPSILON

logger = logging.getLogger(__name__)

KINDS = ("dfa", "nfa", "nfae")


def _get(record, key, path, expected=None):
    if not isinstance(record, dict):
        raise LoaderError("Expected an object", path)
    if key not in record:
        raise LoaderError(f"Missing key {key!r}", path)
    value = record[key]
    if expected is not None and not isinstance(value, expected):
        raise LoaderError(f"Expected {expected.__name__} for {key!r}", f"{path}.{key}")
    return value


def _names(record, key, path, required=True):
    if not required and key not in record:
        return []
    values = _get(record, key, path, list)
    for i, value in enumerate(values):
        if not isinstance(value, str):
            raise LoaderError("Expected a string", f"{path}.{key}[{i}]")
    return list(more_itertools.unique_everseen(values))


def _guess_kind(description):
    if "epsilon" in description:
        return "nfae"
    has_start = "start" in description
    has_starts = "starts" in description
    if has_start == has_starts:
        raise LoaderError("Expected exactly one of 'start' and 'starts'")
    return "dfa" if has_start else "nfa"


def from_dict(description, kind=None):
    """
    Build an automaton from a description.

    :param description: a dict shaped like the module docstring
    :param kind: "dfa", "nfa" or "nfae" to force the kind of automaton,
        otherwise it is guessed from the description
    :return: a DFA, NFA or EpsilonNFA
    """
    if not isinstance(description, dict):
        raise LoaderError("Expected an object")
    if kind is None:
        kind = _guess_kind(description)
    elif kind not in KINDS:
        raise ValueError(f"Unknown automaton kind {kind!r}, expected one of {KINDS}")

    path = "$"
    states = [State(n) for n in _names(description, "states", path, required=False)]
    alphabet = [Symbol(v) for v in _names(description, "alphabet", path, required=False)]
    ends = [State(n) for n in _names(description, "ends", path)]

    if kind == "dfa":
        starts = [State(_get(description, "start", path, str))]
    else:
        starts = [State(n) for n in _names(description, "starts", path)]

    delta = {}
    for i, record in enumerate(_get(description, "delta", path, list)):
        record_path = f"{path}.delta[{i}]"
        state = State(_get(record, "state", record_path, str))
        symbol = Symbol(_get(record, "symbol", record_path, str))
        if kind == "dfa":
            images = [State(_get(record, "image", record_path, str))]
            transition = Transition(symbol, state)
            if delta.get(transition, images[0]) != images[0]:
                raise LoaderError("Duplicate transition", record_path)
            delta[transition] = images[0]
        else:
            images = [State(n) for n in _names(record, "images", record_path)]
            if not images:
                raise LoaderError("Expected at least one image", f"{record_path}.images")
            delta.setdefault(Transition(symbol, state), []).extend(images)
        states.append(state)
        states.extend(images)
        alphabet.append(symbol)

    states.extend(starts)
    states.extend(ends)
    fsm = FiniteStateMachine(states, alphabet, ends)

    if kind == "dfa":
        return DFA(starts[0], delta, fsm)
    if kind == "nfa":
        return NFA(starts, delta, fsm)

    epsilon = description.get("epsilon", EPSILON)
    if not isinstance(epsilon, str):
        raise LoaderError("Expected a string", f"{path}.epsilon")
    return EpsilonNFA(starts, delta, fsm, epsilon=epsilon)


def from_json(text, kind=None):
    try:
        description = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoaderError(f"Invalid JSON: {e.msg}", f"line {e.lineno}") from e
    return from_dict(description, kind=kind)


def from_json_file(path, kind=None):
    logger.debug("Loading automaton from %s", path)
    with open(path, encoding="utf-8") as f:
        return from_json(f.read(), kind=kind)
