import json

import pandas as pd
import pytest
from unittest.mock import patch

import main
from restolink.snapshot_loader import SnapshotLoadError

MAITRE = [
    {
        "name": "Le Petit Bistro",
        "website": "https://petit-bistro.fr",
        "phone": ["+33 1 42 00 00 01", "+33 6 00 00 00 01"],
        "address": {"street": "1 rue de Rivoli", "zip": "75001", "city": "Paris", "country": "France"},
        "specialities": ["Bistrot"],
    },
    {
        "name": "Chez Marcel",
        "phone": [],
        "address": {"street": "8 rue Neuve", "zip": "69002", "city": "Lyon", "country": "France"},
        "specialities": [],
    },
    None,
    {
        "name": "La Cabane",
        "phone": ["+33 5 00 00 00 09"],
        "address": {"street": "2 plage Nord", "zip": "33120", "city": "Arcachon", "country": "France"},
        "specialities": [],
    },
]

MICHELIN = [
    {
        "name": "Petit Bistro",
        "phone": "+33 6 00 00 00 01",
        "website": "https://petit-bistro.fr",
        "address": {"street": "1 rue de Rivoli", "city": "Paris", "zip": "75001", "country": "France"},
        "rating": 0,
    },
    {
        "name": "Marcel",
        "phone": "+33 4 00 00 00 00",
        "address": {"street": "8, rue Neuve", "city": "Lyon", "zip": "69002", "country": "France"},
        "rating": 0,
    },
]


@pytest.mark.asyncio
async def test_main_links_snapshots_and_writes_outputs(tmp_path):
    """
    Full run over two small snapshots: one phone link, one address fallback,
    one restaurant without counterpart.
    """
    maitre_path = tmp_path / "maitre.json"
    michelin_path = tmp_path / "michelin.json"
    maitre_path.write_text(json.dumps(MAITRE), encoding="utf-8")
    michelin_path.write_text(json.dumps(MICHELIN), encoding="utf-8")
    matches_path = tmp_path / "out" / "matches.json"
    unmatched_path = tmp_path / "out" / "unmatched.csv"

    with patch("main.MAITRE_SNAPSHOT", str(maitre_path)), \
         patch("main.MICHELIN_SNAPSHOT", str(michelin_path)), \
         patch("main.MATCHES_OUTPUT", str(matches_path)), \
         patch("main.UNMATCHED_OUTPUT", str(unmatched_path)), \
         patch("main.MATCH_MODE", "chain"), \
         patch("main.CLAIM_POLICY", "exclusive"):
        await main.main()

    pairs = json.loads(matches_path.read_text(encoding="utf-8"))
    assert [(p["maitre"]["name"], p["michelin"]["name"], p["matcher"]) for p in pairs] == [
        ("Le Petit Bistro", "Petit Bistro", "phone"),
        ("Chez Marcel", "Marcel", "address"),
    ]
    assert pairs[0]["maitre"]["specialities"] == ["Bistrot"]

    unmatched = pd.read_csv(unmatched_path)
    assert list(unmatched["name"]) == ["La Cabane"]


@pytest.mark.asyncio
async def test_main_phone_only_mode(tmp_path):
    maitre_path = tmp_path / "maitre.json"
    michelin_path = tmp_path / "michelin.json"
    maitre_path.write_text(json.dumps(MAITRE), encoding="utf-8")
    michelin_path.write_text(json.dumps(MICHELIN), encoding="utf-8")
    matches_path = tmp_path / "matches.json"

    with patch("main.MAITRE_SNAPSHOT", str(maitre_path)), \
         patch("main.MICHELIN_SNAPSHOT", str(michelin_path)), \
         patch("main.MATCHES_OUTPUT", str(matches_path)), \
         patch("main.UNMATCHED_OUTPUT", str(tmp_path / "unmatched.csv")), \
         patch("main.MATCH_MODE", "phone"):
        await main.main()

    pairs = json.loads(matches_path.read_text(encoding="utf-8"))
    assert len(pairs) == 1
    assert pairs[0]["matcher"] == "phone"


@pytest.mark.asyncio
async def test_main_aborts_without_output_on_load_failure(tmp_path):
    maitre_path = tmp_path / "maitre.json"
    maitre_path.write_text(json.dumps(MAITRE), encoding="utf-8")
    matches_path = tmp_path / "matches.json"

    with patch("main.MAITRE_SNAPSHOT", str(maitre_path)), \
         patch("main.MICHELIN_SNAPSHOT", str(tmp_path / "missing.json")), \
         patch("main.MATCHES_OUTPUT", str(matches_path)), \
         patch("main.UNMATCHED_OUTPUT", str(tmp_path / "unmatched.csv")):
        with pytest.raises(SnapshotLoadError) as exc_info:
            await main.main()

    assert exc_info.value.source == "michelin"
    assert not matches_path.exists()
