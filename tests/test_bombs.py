"""
Tests for blast computation and the bomb lifecycle
"""
import pytest

from arena.grid import CellKind
from game.bombs import blast_cells
from game.events import EventKind
from game.game_state import GameStatus, Rejection

OPEN = """
#########
#.......#
#.......#
#.......#
#.......#
#.......#
#.......#
#.......#
#########
"""

LANE = """
#######
#.x...#
#.#.#.#
#.....#
#######
#######
#######
"""


def test_blast_cross_on_open_board(session_factory):
    session = session_factory(OPEN)
    cells = blast_cells(session.grid, 4, 4, 2)
    assert cells[0] == (4, 4)
    assert set(cells) == {
        (4, 4), (4, 3), (4, 2), (4, 5), (4, 6), (3, 4), (2, 4), (5, 4), (6, 4)
    }
    assert len(cells) == len(set(cells))


def test_destructible_stops_arm_but_is_hit(session_factory):
    session = session_factory(LANE)
    cells = set(blast_cells(session.grid, 1, 1, 2))
    assert (1, 1) in cells
    assert (2, 1) in cells
    assert (3, 1) not in cells


def test_wall_is_not_part_of_blast(session_factory):
    session = session_factory(LANE)
    cells = set(blast_cells(session.grid, 3, 1, 3))
    assert (3, 0) not in cells
    assert {(3, 2), (3, 3)} <= cells
    assert (3, 4) not in cells
    assert {(4, 1), (5, 1)} <= cells
    assert (6, 1) not in cells
    # destructible to the west ends that arm
    assert (2, 1) in cells
    assert (1, 1) not in cells


def test_blast_stops_at_board_edge(session_factory):
    session = session_factory("""
    ...
    ...
    ...
    """)
    assert set(blast_cells(session.grid, 0, 0, 5)) == {(0, 0), (1, 0), (2, 0), (0, 1), (0, 2)}


def test_place_bomb_spends_capacity(controller, session_factory):
    controller.session = session_factory(OPEN, player=(2, 2))
    result = controller.on_place_bomb()
    assert result['placed']
    bomb = result['bomb']
    assert (bomb.x, bomb.y) == (2, 2)
    assert controller.session.player.bombs == 1
    fuses = controller.events.pending(EventKind.BOMB_FUSE)
    assert [(e.due_ms, e.payload) for e in fuses] == [(2000, bomb.id)]


def test_place_bomb_without_capacity(controller, session_factory):
    controller.session = session_factory(OPEN, bombs=1)
    assert controller.on_place_bomb()['placed']
    controller.on_direction(1, 0)
    result = controller.on_place_bomb()
    assert result['rejected'] == Rejection.NO_BOMBS
    assert len(controller.session.bombs) == 1
    assert controller.session.player.bombs == 0


def test_bomb_ids_unique(controller, session_factory):
    controller.session = session_factory(OPEN, bombs=3)
    ids = []
    for _ in range(3):
        ids.append(controller.on_place_bomb()['bomb'].id)
        controller.on_direction(1, 0)
    assert len(set(ids)) == 3


def test_full_lifecycle(controller, session_factory):
    controller.session = session_factory(LANE, player=(1, 1))
    session = controller.session
    controller.on_place_bomb()
    controller.on_direction(0, 1)
    controller.on_direction(0, 1)   # (1, 3), still inside range 2

    controller.advance(1999)
    assert len(session.bombs) == 1
    assert session.grid.get(2, 1) == CellKind.DESTRUCTIBLE

    controller.advance(1)
    assert len(session.bombs) == 0
    assert session.grid.get(2, 1) == CellKind.EMPTY
    assert session.score == 10
    assert session.explosions == {(1, 1), (2, 1), (1, 2), (1, 3)}
    # player stood at distance 2 south and got caught
    assert session.player.health == 2

    controller.advance(499)
    assert session.explosions
    assert session.player.bombs == 1

    controller.advance(1)
    assert session.explosions == set()
    assert session.player.bombs == 2


def test_detonation_kills_monsters(controller, session_factory):
    controller.session = session_factory(OPEN, player=(1, 1), monsters=[(5, 4), (6, 6)])
    session = controller.session
    session.bombs.add_bomb(4, 4, 0, 2000)
    controller.bomb_engine.detonate(session, session.bombs.bombs[0].id)
    assert session.monsters.positions() == [(6, 6)]
    assert session.score == 100


def test_own_bomb_can_kill_player(controller, session_factory):
    controller.session = session_factory(OPEN, player=(2, 2), health=1)
    controller.on_place_bomb()
    controller.advance(2000)
    assert controller.session.player.health == 0
    assert controller.status == GameStatus.LOST


def test_range_read_at_detonation(controller, session_factory):
    controller.session = session_factory("""
    #########
    #.r.....#
    #########
    #########
    #########
    #########
    #########
    #########
    #########
    """, player=(1, 1))
    session = controller.session
    controller.on_place_bomb()
    controller.on_direction(1, 0)      # picks up range -> 3
    controller.on_direction(1, 0)
    controller.on_direction(1, 0)
    controller.on_direction(1, 0)      # (5, 1)
    controller.advance(2000)
    assert (4, 1) in session.explosions
    assert (5, 1) not in session.explosions
    assert session.player.health == 3


def test_capacity_refill_is_capped(controller, session_factory):
    controller.session = session_factory(OPEN, player=(1, 1))
    session = controller.session
    controller.on_place_bomb()
    session.player.stats['bombs'] = session.player.max_bombs
    controller.bomb_engine.clear_explosion(session)
    assert session.player.bombs == session.player.max_bombs


def test_bombs_run_independent_timers(controller, session_factory):
    controller.session = session_factory(OPEN, player=(1, 1))
    session = controller.session
    controller.on_place_bomb()            # t=0 at (1, 1)
    controller.on_direction(1, 0)
    controller.on_direction(1, 0)
    controller.on_direction(1, 0)         # (4, 1)
    controller.advance(1000)
    controller.on_place_bomb()            # t=1000 at (4, 1)
    controller.on_direction(0, 1)
    controller.on_direction(0, 1)
    controller.on_direction(0, 1)         # (4, 4)

    controller.advance(1000)              # t=2000, first bomb
    assert [(b.x, b.y) for b in session.bombs] == [(4, 1)]
    assert (1, 1) in session.explosions
    controller.advance(500)               # first clear
    assert session.explosions == set()
    assert session.player.bombs == 1

    controller.advance(500)               # t=3000, second bomb
    assert len(session.bombs) == 0
    assert (4, 1) in session.explosions
    controller.advance(500)
    assert session.player.bombs == 2
    assert session.player.health == 3


def test_fuse_after_game_over_only_removes_bomb(controller, session_factory):
    controller.session = session_factory(LANE, player=(1, 1))
    session = controller.session
    controller.on_place_bomb()
    session.transition_to(GameStatus.LOST)

    controller.advance(2000)
    assert len(session.bombs) == 0
    assert session.grid.get(2, 1) == CellKind.DESTRUCTIBLE
    assert session.score == 0
    assert session.explosions == set()

    controller.advance(500)
    assert session.player.bombs == 2


@pytest.mark.parametrize("elapsed", [0, 1000, 2000, 2400])
def test_reset_drops_pending_bomb_events(controller, session_factory, elapsed):
    controller.session = session_factory(OPEN, player=(1, 1))
    controller.on_place_bomb()
    controller.advance(elapsed)
    controller.reset()
    assert controller.events.pending(EventKind.BOMB_FUSE) == []
    assert controller.events.pending(EventKind.EXPLOSION_CLEAR) == []
    controller.advance(5000)
    assert controller.session.player.bombs == 2
    assert controller.session.explosions == set()
