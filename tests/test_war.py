from __future__ import annotations

import logging
import random

import pytest

from cardroom import war
from cardroom.cards import Card, Deck


def _deck(codes: str) -> Deck:
    return Deck([Card.from_code(code) for code in codes.split()])


def test_war_strength_ranks_ace_high() -> None:
    ace, king, two = (Card.from_code(code) for code in ("AH", "KS", "2D"))
    assert war.war_strength(ace) > war.war_strength(king) > war.war_strength(two)


def test_config_validation() -> None:
    with pytest.raises(ValueError):
        war.WarConfig(num_facedown=-1)
    with pytest.raises(ValueError):
        war.WarConfig(max_rounds=0)
    assert war.WarConfig(max_rounds=None).max_rounds is None


def test_battle_higher_card_takes_both() -> None:
    first, second = _deck("KH 4H"), _deck("2S")
    report = war.battle(first, second, random.Random(0))

    assert report.round_winner is war.Player.FIRST
    assert report.wars == 0
    assert report.cards_won == 2
    assert report.game_winner is None
    assert first.card_count == 3
    assert sorted(card.label() for card in first.cards[1:]) == ["2S", "KH"]
    assert second.card_count == 0


def test_battle_ace_beats_king() -> None:
    report = war.battle(_deck("KH"), _deck("AS"), random.Random(0))
    assert report.round_winner is war.Player.SECOND


@pytest.mark.parametrize(
    ("first", "second", "winner"),
    [
        ("", "2S", war.Player.SECOND),
        ("2S", "", war.Player.FIRST),
    ],
)
def test_battle_with_empty_deck_ends_game(first: str, second: str, winner: war.Player) -> None:
    first_deck, second_deck = _deck(first), _deck(second)
    report = war.battle(first_deck, second_deck, random.Random(0))

    assert report.game_winner is winner
    assert report.round_winner is None
    assert first_deck.card_count + second_deck.card_count == 1


def test_war_resolves_with_facedown_cards() -> None:
    first = _deck("5H 2H 3H 4H KH")
    second = _deck("5S 2S 3S 4S QS")

    report = war.battle(first, second, random.Random(1))

    assert report.round_winner is war.Player.FIRST
    assert report.wars == 1
    assert report.cards_won == 10
    assert first.card_count == 10
    assert second.card_count == 0


def test_multi_war_accumulates_winnings() -> None:
    first = _deck("5H 2H 3H 4H 9H 6H 7H 8H KH")
    second = _deck("5S 2S 3S 4S 9S 6S 7S 8S AS")

    report = war.battle(first, second, random.Random(1))

    assert report.round_winner is war.Player.SECOND
    assert report.wars == 2
    assert report.cards_won == 18
    assert second.card_count == 18
    assert first.card_count == 0


def test_running_out_during_war_loses_the_game() -> None:
    first = _deck("5H 2H")
    second = _deck("5S 2S 3S 4S 6S")

    report = war.battle(first, second, random.Random(1))

    assert report.game_winner is war.Player.SECOND
    assert report.wars == 1


def test_war_without_facedown_cards_compares_next_pair() -> None:
    config = war.WarConfig(num_facedown=0)
    first = _deck("7H 3H")
    second = _deck("7S 9S")

    report = war.battle(first, second, random.Random(1), config)

    assert report.round_winner is war.Player.SECOND
    assert report.cards_won == 4
    assert second.card_count == 4


def test_war_announcement_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="cardroom.war")
    war.battle(_deck("5H 2H 3H 4H KH"), _deck("5S 2S 3S 4S QS"), random.Random(1))

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("war!") for message in messages)
    assert any("wins the war" in message for message in messages)


def test_game_end_is_logged_at_debug_only(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="cardroom.war")
    result = war.play_war(_deck("KH"), _deck("2S"), random.Random(1))

    assert result.winner is war.Player.FIRST
    assert not any("wins after" in record.getMessage() for record in caplog.records)

    caplog.clear()
    caplog.set_level(logging.DEBUG, logger="cardroom.war")
    war.play_war(_deck("KH"), _deck("2S"), random.Random(1))

    assert any("wins after 2 round" in record.getMessage() for record in caplog.records)


def test_play_war_runs_until_a_deck_is_empty() -> None:
    first = _deck("KH QH")
    second = _deck("2S 3S")
    seen: list[int] = []

    result = war.play_war(
        first,
        second,
        random.Random(3),
        on_round=lambda number, _first, _second: seen.append(number),
    )

    assert result.winner is war.Player.FIRST
    assert result.rounds == 3
    assert seen == [1, 2, 3]
    assert result.first_cards == 4
    assert result.second_cards == 0
    assert not result.hit_round_limit


def test_play_war_round_limit_picks_larger_pile() -> None:
    config = war.WarConfig(max_rounds=1)
    result = war.play_war(_deck("KH QH JH"), _deck("2S 3S"), random.Random(0), config)

    assert result.hit_round_limit
    assert result.rounds == 1
    assert result.winner is war.Player.FIRST
    assert (result.first_cards, result.second_cards) == (4, 1)


def test_play_war_round_limit_with_equal_piles_has_no_winner() -> None:
    config = war.WarConfig(max_rounds=1)
    result = war.play_war(_deck("KH"), _deck("2S 3S 4S"), random.Random(0), config)

    assert result.winner is None
    assert (result.first_cards, result.second_cards) == (2, 2)


def test_new_game_splits_full_deck() -> None:
    first, second = war.new_game(random.Random(5))
    again_first, _ = war.new_game(random.Random(5))

    assert first.card_count == 26
    assert second.card_count == 26
    assert first.describe() == again_first.describe()


def test_full_game_conserves_cards() -> None:
    rng = random.Random(17)
    first, second = war.new_game(rng)
    result = war.play_war(first, second, rng, war.WarConfig(max_rounds=300))

    assert result.rounds <= 300
    if result.winner is not None and not result.hit_round_limit:
        loser_cards = result.second_cards if result.winner is war.Player.FIRST else result.first_cards
        assert loser_cards == 0
    else:
        assert result.first_cards + result.second_cards == 52
