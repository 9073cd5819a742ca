import pytest

from arcatek.buffer import RED, YELLOW, Color, Square, Vec2
from arcatek.events import DisplayEventManager, GameEventManager, Key
from arcatek.pacman import (
    Map,
    PacGum,
    PacmanGame,
    Player,
    Tile,
    Wall,
    create_game,
)


def _collect(dem):
    drawn = []
    dem.draw_square.attach(drawn.append)
    return drawn


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("#.\n .#\n", encoding="utf-8")
    return path


def test_tile_display_sends_square():
    dem = DisplayEventManager()
    drawn = _collect(dem)
    color = Color(1, 2, 3, 4)
    Tile(Vec2(5, 6), Vec2(7, 8), color).display(dem)
    assert drawn == [Square(Vec2(5, 6), Vec2(7, 8), color)]


def test_wall_and_gum_colors():
    assert Wall(Vec2(0, 0), Vec2(10, 10)).color == RED
    assert PacGum(Vec2(0, 0), Vec2(10, 10)).color == YELLOW


def test_map_from_file_positions(map_file):
    tiles = Map.from_file(map_file).tiles
    assert [type(t) for t in tiles] == [Wall, PacGum, PacGum, Wall]
    assert [(t.position.x, t.position.y) for t in tiles] == [
        (0, 0),
        (10, 0),
        (10, 10),
        (20, 10),
    ]
    assert all((t.size.x, t.size.y) == (10, 10) for t in tiles)


def test_map_ignores_other_characters(tmp_path):
    path = tmp_path / "blank.txt"
    path.write_text("abc  \nxyz\n", encoding="utf-8")
    assert Map.from_file(path).tiles == []


def test_map_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Map.from_file(tmp_path / "nope.txt")


def test_map_display_in_order():
    tiles = [Wall(Vec2(0, 0), Vec2(10, 10)), PacGum(Vec2(10, 0), Vec2(10, 10))]
    dem = DisplayEventManager()
    drawn = _collect(dem)
    Map(tiles).display(dem)
    assert [s.color for s in drawn] == [RED, YELLOW]
    assert [s.pos for s in drawn] == [Vec2(0, 0), Vec2(10, 0)]


def test_map_tiles_is_a_copy():
    m = Map([Wall(Vec2(0, 0), Vec2(10, 10))])
    m.tiles.clear()
    assert len(m.tiles) == 1


def test_player_defaults():
    square = Player().square
    assert square.pos == Vec2(20, 20)
    assert square.size == Vec2(15, 15)
    assert square.color == Color(0, 255, 0, 255)


def test_player_moves_and_returns():
    player = Player()
    start = player.square.pos
    player.move_up()
    assert player.square.pos == Vec2(start.x, start.y - 1)
    player.move_right()
    assert player.square.pos == Vec2(start.x + 1, start.y - 1)
    player.move_down()
    player.move_left()
    assert player.square.pos == start


def test_player_display_sends_copy():
    player = Player()
    dem = DisplayEventManager()
    drawn = _collect(dem)
    player.display(dem)
    drawn[0].pos.x += 100
    assert player.square.pos == Vec2(20, 20)
    assert drawn[0].size == Vec2(15, 15)


def test_game_key_presses_move_player(map_file):
    game = PacmanGame(map_file)
    gem, dem = GameEventManager(), DisplayEventManager()
    game.init(gem, dem)
    start = game.player.square.pos
    gem.key_pressed.notify(Key.RIGHT)
    gem.key_pressed.notify(Key.RIGHT)
    gem.key_pressed.notify(Key.DOWN)
    assert game.player.square.pos == Vec2(start.x + 2, start.y + 1)
    gem.key_pressed.notify(Key.LEFT)
    gem.key_pressed.notify(Key.LEFT)
    gem.key_pressed.notify(Key.UP)
    assert game.player.square.pos == start


def test_game_update_draws_map_then_player(map_file):
    game = PacmanGame(map_file)
    gem, dem = GameEventManager(), DisplayEventManager()
    drawn = _collect(dem)
    game.init(gem, dem)
    game.update()
    assert len(drawn) == len(game.map.tiles) + 1
    assert drawn[-1] == game.player.square
    assert [s.color for s in drawn[:-1]] == [t.color for t in game.map.tiles]


def test_game_update_before_init_raises(map_file):
    with pytest.raises(RuntimeError):
        PacmanGame(map_file).update()


def test_game_missing_map_is_empty(tmp_path):
    game = PacmanGame(tmp_path / "missing.txt")
    assert game.map.tiles == []


def test_create_game_without_default_map(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    game = create_game()
    assert isinstance(game, PacmanGame)
    assert game.map.tiles == []