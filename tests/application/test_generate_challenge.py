"""Unit tests for the generate_challenge use case and its helpers."""
import random

import pytest

from globetrotter.application.generate_challenge import (
    build_options,
    generate_challenge,
    pick_clues,
    pick_fact,
)
from globetrotter.domain.errors import InvalidInputError, NoDataError
from tests.conftest import make_catalog, make_destination


class TestPickClues:
    def test_returns_requested_count(self, paris):
        assert len(pick_clues(paris, 2, random.Random(1))) == 2

    def test_no_duplicates(self, paris):
        clues = pick_clues(paris, 4, random.Random(1))
        assert len({c.id for c in clues}) == 4

    def test_fewer_available_returns_all_without_padding(self):
        d = make_destination(n_clues=1)
        clues = pick_clues(d, 5, random.Random(1))
        assert [c.id for c in clues] == ["paris-c0"]

    def test_no_clues_returns_empty(self):
        assert pick_clues(make_destination(n_clues=0), 2) == []

    def test_clues_belong_to_destination(self, paris):
        ids = {c.id for c in paris.clues}
        for seed in range(20):
            assert all(c.id in ids for c in pick_clues(paris, 2, random.Random(seed)))


class TestPickFact:
    def test_no_facts_returns_none(self):
        assert pick_fact(make_destination(n_facts=0)) is None

    def test_fact_from_destination(self, paris):
        fact = pick_fact(paris, random.Random(3))
        assert fact.id in {f.id for f in paris.facts}

    def test_all_facts_reachable(self, paris):
        rng = random.Random(5)
        seen = {pick_fact(paris, rng).id for _ in range(200)}
        assert seen == {f.id for f in paris.facts}


class TestBuildOptions:
    def test_single_destination_catalog(self, paris):
        assert build_options(paris, [paris], 4) == ["Paris"]

    def test_count_capped_by_catalog(self, catalog):
        options = build_options(catalog[0], catalog, 10, random.Random(2))
        assert sorted(options) == ["Paris", "Rome", "Tokyo"]

    def test_count_respected(self):
        catalog = make_catalog("Paris", "Tokyo", "Rome", "Cairo", "Sydney", "Lima")
        options = build_options(catalog[0], catalog, 4, random.Random(2))
        assert len(options) == 4
        assert options.count("Paris") == 1

    def test_option_count_one_gives_only_answer(self, catalog):
        assert build_options(catalog[1], catalog, 1) == ["Tokyo"]

    def test_duplicate_names_are_skipped(self):
        paris = make_destination("paris", "Paris")
        paris_tx = make_destination("paris-tx", "Paris", country="United States")
        rome = make_destination("rome", "Rome")
        rome2 = make_destination("rome-2", "Rome")
        options = build_options(paris, [paris, paris_tx, rome, rome2], 4, random.Random(0))
        assert sorted(options) == ["Paris", "Rome"]

    def test_correct_position_varies(self):
        catalog = make_catalog("Paris", "Tokyo", "Rome", "Cairo")
        rng = random.Random(11)
        positions = {
            build_options(catalog[0], catalog, 4, rng).index("Paris") for _ in range(200)
        }
        assert positions == {0, 1, 2, 3}


class TestGenerateChallenge:
    def test_empty_catalog_raises_no_data(self):
        with pytest.raises(NoDataError):
            generate_challenge([])

    def test_invalid_counts_rejected(self, catalog):
        with pytest.raises(InvalidInputError):
            generate_challenge(catalog, clue_count=0)
        with pytest.raises(InvalidInputError):
            generate_challenge(catalog, option_count=-3)

    def test_options_contain_answer_once_and_are_unique(self, catalog):
        rng = random.Random(4)
        for _ in range(100):
            ch = generate_challenge(catalog, 2, 4, rng)
            assert ch.options.count(ch.destination_name) == 1
            assert len(set(ch.options)) == len(ch.options)
            assert len(ch.options) == min(4, len(catalog))

    def test_clue_count_matches_destination(self):
        catalog = [
            make_destination("a", "A", n_clues=1),
            make_destination("b", "B", n_clues=3),
            make_destination("c", "C", n_clues=0),
        ]
        by_id = {d.id: d for d in catalog}
        rng = random.Random(8)
        for _ in range(60):
            ch = generate_challenge(catalog, 2, 4, rng)
            destination = by_id[ch.destination_id]
            assert len(ch.clues) == min(2, len(destination.clues))
            clue_ids = [c.id for c in ch.clues]
            assert len(set(clue_ids)) == len(clue_ids)
            assert set(clue_ids) <= {c.id for c in destination.clues}

    def test_destination_choice_varies(self, catalog):
        rng = random.Random(21)
        chosen = {generate_challenge(catalog, rng=rng).destination_id for _ in range(100)}
        assert chosen == {"paris", "tokyo", "rome"}

    def test_correct_position_not_fixed(self):
        catalog = make_catalog("Paris", "Tokyo", "Rome", "Cairo", "Sydney")
        rng = random.Random(13)
        positions = {generate_challenge(catalog, rng=rng).correct_index for _ in range(200)}
        assert len(positions) > 1

    def test_paris_scenario(self, catalog):
        rng = random.Random(99)
        paris_rounds = 0
        for _ in range(60):
            ch = generate_challenge(catalog, 2, 4, rng)
            if ch.destination_name != "Paris":
                continue
            paris_rounds += 1
            assert len(ch.clues) == 2
            assert all(c.id.startswith("paris-") for c in ch.clues)
            assert len(ch.options) == 3
            assert ch.options.count("Paris") == 1
        assert paris_rounds > 0

    def test_payload_exposes_only_reference(self, catalog):
        payload = generate_challenge(catalog, rng=random.Random(0)).to_dict()
        assert set(payload["destination"]) == {"id", "name"}
        assert set(payload) == {"destination", "clues", "options"}

    def test_default_rng_works(self, catalog):
        ch = generate_challenge(catalog)
        assert ch.destination_name in {"Paris", "Tokyo", "Rome"}
