"""
Tests for the grid model and entity bookkeeping
"""
import pytest

from arena.grid import Grid, CellKind
from entities.bomb import BombManager
from entities.monster import MonsterManager
from entities.player import Player


def test_grid_queries():
    grid = Grid(5)
    grid.set(2, 3, CellKind.TRAP)
    assert grid.get(2, 3) == CellKind.TRAP
    assert grid.get(3, 2) == CellKind.EMPTY
    assert grid.get(-1, 0) is None
    assert grid.get(5, 0) is None
    assert grid.positions_of(CellKind.TRAP) == [(2, 3)]
    assert grid.count(CellKind.EMPTY) == 24
    assert len(grid.border_cells()) == 16


def test_grid_copy_is_independent():
    grid = Grid(4)
    snapshot = grid.copy()
    grid.set(1, 1, CellKind.WALL)
    assert snapshot.get(1, 1) == CellKind.EMPTY
    assert not grid.is_walkable(1, 1)
    assert snapshot.is_walkable(1, 1)


def test_grid_must_be_square():
    with pytest.raises(ValueError):
        Grid.from_rows([[CellKind.EMPTY] * 3, [CellKind.EMPTY] * 2, [CellKind.EMPTY] * 3])
    with pytest.raises(ValueError):
        Grid.from_rows([[CellKind.WALL] * 5] * 3)


def test_player_damage_and_heal():
    player = Player(1, 1)
    player.heal(5)
    assert player.health == 5
    assert not player.take_damage(4)
    assert player.take_damage(3)
    assert player.health == 0
    assert not player.is_alive()


def test_player_bomb_capacity():
    player = Player(1, 1, bombs=1)
    assert player.use_bomb()
    assert not player.use_bomb()
    player.add_bomb_capacity()
    assert (player.bombs, player.max_bombs) == (1, 2)
    player.refill_bomb()
    player.refill_bomb()
    assert player.bombs == 2


def test_bomb_manager_remove_twice():
    bombs = BombManager()
    bomb = bombs.add_bomb(3, 4, 100, 2000)
    assert bomb.detonates_at == 2100
    assert bombs.has_bomb_at(3, 4)
    assert bombs.remove_bomb(bomb.id) is bomb
    assert bombs.remove_bomb(bomb.id) is None
    assert not bombs.has_bomb_at(3, 4)


def test_monster_manager_remove_in():
    monsters = MonsterManager()
    monsters.add_monster(2, 2)
    monsters.add_monster(5, 5)
    monsters.add_monster(2, 2)
    removed = monsters.remove_in({(2, 2)})
    assert [m.id for m in removed] == [0, 2]
    assert monsters.positions() == [(5, 5)]
