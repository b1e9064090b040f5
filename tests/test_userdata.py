import pytest

from invaders.userdata import DEFAULT_SAVE_FILE, PlayerStore


@pytest.fixture
def store(tmp_path):
    return PlayerStore(tmp_path / "players.txt")


def test_default_path():
    assert PlayerStore().path.name == DEFAULT_SAVE_FILE


def test_missing_file_gives_defaults(store):
    assert store.load_all() == {}
    assert store.last_level("nobody") == 0
    assert store.player_score("nobody") == 0


def test_save_and_read_back(store):
    store.save_player("alice", 5, 1200)
    assert store.last_level("alice") == 5
    assert store.player_score("alice") == 1200


def test_save_keeps_other_players(store):
    store.save_player("alice", 5, 1200)
    store.save_player("bob", 2, 300)
    store.save_player("alice", 6, 1500)
    assert store.load_all() == {"alice": (6, 1500), "bob": (2, 300)}


def test_file_format(store):
    store.save_all({"alice": (3, 40)})
    assert store.path.read_text(encoding="utf-8") == "alice,3,40\n"


def test_round_trip_all(store):
    data = {"alice": (1, 10), "bob": (7, 0), "": (2, 5)}
    store.save_all(data)
    assert store.load_all() == data


def test_incomplete_lines_skipped(store):
    store.path.write_text("bob,3,40\nbroken\ncarl,2,\n\n", encoding="utf-8")
    assert store.load_all() == {"bob": (3, 40)}


def test_later_line_wins(store):
    store.path.write_text("bob,3,40\nbob,4,50\n", encoding="utf-8")
    assert store.load_all() == {"bob": (4, 50)}


def test_trailing_carriage_return_tolerated(store):
    store.path.write_text("bob,3,40\r\n", encoding="utf-8")
    assert store.player_score("bob") == 40


def test_non_numeric_level_raises(store):
    store.path.write_text("ann,x,5\n", encoding="utf-8")
    with pytest.raises(ValueError):
        store.load_all()


def test_save_into_missing_directory_raises(tmp_path):
    store = PlayerStore(tmp_path / "absent" / "players.txt")
    with pytest.raises(OSError):
        store.save_player("alice", 1, 1)