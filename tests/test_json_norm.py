"""Tests for the canonical JSON normalization layer."""

import json
from pathlib import Path

from dino_compare.model import Diet, Units
from dino_compare.model.records import DisplayRecord, Tile
from dino_compare.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    # Keys should be sorted in the serialized output
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_normalizes_paths():
    s = stable_json_dumps({"p": Path("a") / "b"})
    obj = json.loads(s)
    assert obj["p"] == "a/b"


def test_stable_json_dumps_uses_enum_values():
    obj = json.loads(stable_json_dumps({"diet": Diet.CARNIVORE, "units": Units.METRIC}))
    assert obj == {"diet": "carnivore", "units": "metric"}


def test_stable_json_dumps_uses_to_dict():
    rec = DisplayRecord(
        species="Pigeon",
        diet=Diet.HERBIVORE,
        where="World Wide",
        when="Holocene",
        fact="All birds are considered dinosaurs.",
        weight=0,
        height=23,
        units=Units.METRIC,
    )
    obj = json.loads(stable_json_dumps([rec, Tile("Ada", "images/human.png", "", "human")]))
    assert obj[0]["species"] == "Pigeon"
    assert obj[0]["units"] == "metric"
    assert obj[1]["kind"] == "human"


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert '"a"' in txt and '"b"' in txt
