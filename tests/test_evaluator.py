import pytest

from videopoker.cards import parse_cards
from videopoker.evaluator import ONE_PAIR_CUTOFF, _SCORES, evaluate_hand, score_hand
from videopoker.models import HandRank, RankOutcome


def test_score_hand_identifies_all_hand_categories():
    cases = [
        (HandRank.ROYAL_FLUSH, ["AH", "KH", "QH", "JH", "TH"]),
        (HandRank.STRAIGHT_FLUSH, ["9H", "KH", "QH", "JH", "TH"]),
        (HandRank.FOUR_OF_A_KIND, ["AS", "AH", "AD", "AC", "KD"]),
        (HandRank.FULL_HOUSE, ["QC", "QD", "QS", "9H", "9S"]),
        (HandRank.FLUSH, ["AH", "JH", "9H", "6H", "2H"]),
        (HandRank.STRAIGHT, ["9H", "8D", "7C", "6S", "5H"]),
        (HandRank.THREE_OF_A_KIND, ["8H", "8D", "8S", "QD", "JS"]),
        (HandRank.TWO_PAIRS, ["7H", "7D", "4S", "4C", "AS"]),
        (HandRank.ONE_PAIR, ["6H", "6S", "QH", "8D", "4C"]),
        (HandRank.HIGH_CARD, ["AS", "KD", "JH", "9C", "4D"]),
    ]

    for expected_rank, labels in cases:
        assert score_hand(labels).rank == expected_rank, f"labels={labels}"


@pytest.mark.parametrize(
    "labels, score",
    [
        (["AS", "KS", "QS", "JS", "TS"], 1),
        (["KS", "QS", "JS", "TS", "9S"], 2),
        (["5D", "4D", "3D", "2D", "AD"], 10),
        (["AS", "AH", "AD", "AC", "KS"], 11),
        (["2S", "2H", "2D", "2C", "3S"], 166),
        (["AS", "AH", "AD", "KC", "KS"], 167),
        (["2S", "2H", "2D", "3C", "3S"], 322),
        (["AC", "KC", "QC", "JC", "9C"], 323),
        (["7C", "5C", "4C", "3C", "2C"], 1599),
        (["AC", "KD", "QC", "JH", "TC"], 1600),
        (["5C", "4D", "3C", "2H", "AC"], 1609),
        (["AC", "AD", "AH", "KH", "QC"], 1610),
        (["2C", "2D", "2H", "4H", "3C"], 2467),
        (["AS", "AH", "KS", "KH", "QS"], 2468),
        (["3S", "3H", "2S", "2H", "4S"], ONE_PAIR_CUTOFF),
        (["AS", "AH", "KS", "QH", "JS"], 3326),
        (["2S", "2H", "5S", "4H", "3D"], 6185),
        (["AS", "KH", "QS", "JH", "9D"], 6186),
        (["7S", "5H", "4S", "3H", "2D"], 7462),
    ],
)
def test_score_hand_class_boundaries(labels, score):
    assert score_hand(labels).score == score


def test_score_table_covers_every_distinct_hand():
    assert len(_SCORES) == 7462
    assert sorted(_SCORES.values()) == list(range(1, 7463))


def test_wheel_is_the_lowest_straight():
    wheel = score_hand(["AH", "2D", "3C", "4S", "5H"])
    six_high = score_hand(["6H", "2D", "3C", "4S", "5H"])
    assert wheel.rank == HandRank.STRAIGHT
    assert wheel.score > six_high.score


def test_kickers_break_ties_within_a_class():
    stronger = score_hand(["AH", "AD", "KC", "QS", "9H"])
    weaker = score_hand(["AH", "AD", "QC", "JS", "8H"])
    assert stronger.score < weaker.score


def test_score_hand_ignores_card_order_and_accepts_cards():
    labels = ["QS", "AS", "JS", "KS", "TS"]
    assert score_hand(labels) == score_hand(parse_cards(labels)) == RankOutcome(HandRank.ROYAL_FLUSH, 1)


def test_score_hand_requires_five_cards():
    with pytest.raises(ValueError, match="5 cards"):
        score_hand(["AS", "AH", "KS", "KH"])


def test_score_hand_rejects_duplicate_cards():
    with pytest.raises(ValueError, match="duplicate cards"):
        evaluate_hand(["AS", "AS", "AH", "AD", "AC"])
    with pytest.raises(ValueError, match="duplicate cards"):
        score_hand(["2C", "2C", "2C", "2C", "2C"])


def test_two_pairs_pass_through_qualification():
    outcome = evaluate_hand(["AS", "AH", "KS", "KH", "QS"])
    assert outcome == RankOutcome(HandRank.TWO_PAIRS, 2468)


def test_low_pair_is_no_win():
    assert evaluate_hand(["2S", "2H", "7D", "9C", "JH"]) == RankOutcome(HandRank.NO_WIN, 0)


def test_pair_of_jacks_is_jacks_or_better():
    outcome = evaluate_hand(["JS", "JH", "7D", "9C", "2H"])
    assert outcome.rank == HandRank.JACKS_OR_BETTER
    assert outcome.score == score_hand(["JS", "JH", "7D", "9C", "2H"]).score


@pytest.mark.parametrize("face", ["J", "Q", "K", "A"])
def test_every_face_pair_qualifies(face):
    assert evaluate_hand([f"{face}S", f"{face}D", "7D", "9C", "2H"]).rank == HandRank.JACKS_OR_BETTER


def test_pair_of_tens_does_not_qualify():
    assert evaluate_hand(["TS", "TD", "AD", "KC", "QH"]).rank == HandRank.NO_WIN


def test_high_card_is_no_win():
    assert evaluate_hand(["AS", "KH", "QS", "JH", "9D"]) == RankOutcome(HandRank.NO_WIN, 0)
    assert evaluate_hand(["7S", "5H", "4S", "3H", "2D"]) == RankOutcome(HandRank.NO_WIN, 0)


def test_strong_hands_are_untouched():
    assert evaluate_hand(["8H", "8D", "8S", "QD", "JS"]).rank == HandRank.THREE_OF_A_KIND
    assert evaluate_hand(["2S", "2H", "2D", "2C", "3S"]).rank == HandRank.FOUR_OF_A_KIND
    assert evaluate_hand(["AH", "KH", "QH", "JH", "TH"]) == RankOutcome(HandRank.ROYAL_FLUSH, 1)


def test_evaluate_hand_rejects_house_cards():
    with pytest.raises(ValueError):
        evaluate_hand(["__"] * 5)
