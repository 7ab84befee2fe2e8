"""Property-based tests for the game session."""

from hypothesis import given, settings, strategies as st

from klondike.rules.cards import standard_deck
from klondike.rules.piles import DISCARD, FOUNDATIONS, TABLEAUX, PileId
from klondike.session import DrawMode, GameSession, GameState, SessionConfig

DESTINATIONS = TABLEAUX + FOUNDATIONS
CARDS = standard_deck()

operations = st.lists(
    st.tuples(
        st.sampled_from(["draw", "reset", "move", "auto"]),
        st.integers(min_value=0, max_value=len(CARDS) - 1),
        st.integers(min_value=0, max_value=len(DESTINATIONS) - 1),
    ),
    max_size=60,
)


def board(session: GameSession) -> dict:
    return {pid: (tuple(p.cards), p.hidden) for pid, p in session.piles.items()}


def apply(session: GameSession, op: tuple):
    kind, card_index, dest_index = op
    if kind == "draw":
        return session.request_draw()
    if kind == "reset":
        return session.request_reset_deck()
    card = CARDS[card_index]
    if kind == "auto":
        return session.request_auto_move(card)
    pile, _ = session.locate(card)
    return session.request_move(card, pile.pile_id, DESTINATIONS[dest_index])


@given(seed=st.integers(min_value=0, max_value=2**32 - 1))
def test_deal_shape_property(seed: int) -> None:
    """Property: Every deal holds all 52 cards in the triangular layout."""
    session = GameSession(SessionConfig(seed=seed))
    session.new_deal()

    all_cards = [card for pile in session.piles.values() for card in pile.cards]
    assert sorted(all_cards, key=str) == sorted(CARDS, key=str)
    for i, pile_id in enumerate(TABLEAUX):
        pile = session.pile(pile_id)
        assert len(pile) == i + 1
        assert pile.hidden == i


@given(
    seed=st.integers(min_value=0, max_value=10000),
    draw_mode=st.sampled_from(list(DrawMode)),
    draws=st.integers(min_value=1, max_value=30),
)
def test_draw_undo_round_trip_property(seed: int, draw_mode: DrawMode, draws: int) -> None:
    """Property: Undoing every draw and reset restores the opening deck."""
    session = GameSession(SessionConfig(seed=seed, draw_mode=draw_mode))
    session.new_deal()
    opening = board(session)

    for _ in range(draws):
        if not session.request_draw().accepted:
            assert session.request_reset_deck().accepted

    while session.request_undo() is not None:
        pass

    assert board(session) == opening
    assert len(session.log) == 0


@settings(max_examples=50)
@given(seed=st.integers(min_value=0, max_value=10000), ops=operations)
def test_undo_inverts_every_action_property(seed: int, ops: list) -> None:
    """Property: Each accepted action can be undone back to the exact prior board."""
    session = GameSession(SessionConfig(seed=seed))
    session.new_deal()

    for op in ops:
        if session.state != GameState.PLAYING:
            break
        before = board(session)
        depth = len(session.log)

        result = apply(session, op)
        if not result.accepted:
            assert board(session) == before
            assert len(session.log) == depth
            continue
        if session.state != GameState.PLAYING:
            break

        assert len(session.log) == depth + 1
        effect = session.request_undo()
        assert effect.action == result.action
        assert board(session) == before
        if session.state != GameState.PLAYING:
            break
        assert len(session.log) == depth

        assert apply(session, op).accepted


@settings(max_examples=50)
@given(seed=st.integers(min_value=0, max_value=10000), ops=operations)
def test_face_down_cards_stay_buried_property(seed: int, ops: list) -> None:
    """Property: Face-down cards never appear outside the tableau prefix."""
    session = GameSession(SessionConfig(seed=seed))
    session.new_deal()

    for op in ops:
        if session.state != GameState.PLAYING:
            break
        apply(session, op)
        snapshot = session.snapshot()
        assert all(snapshot.pile(DISCARD).face_up)
        for pile_id in FOUNDATIONS:
            assert all(snapshot.pile(pile_id).face_up)
        for pile_id in TABLEAUX:
            face_up = snapshot.pile(pile_id).face_up
            if face_up:
                assert face_up[-1]
            assert list(face_up) == sorted(face_up)
