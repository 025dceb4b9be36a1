from database import SnakeDatabase


def test_empty_database_high_score_is_zero(db):
    assert db.available
    assert db.load_high_score() == 0


def test_save_only_when_higher(db):
    assert db.save_high_score_if_higher(40)
    assert not db.save_high_score_if_higher(30)
    assert not db.save_high_score_if_higher(40)
    assert db.load_high_score() == 40
    assert db.save_high_score_if_higher(50)
    assert db.load_high_score() == 50


def test_zero_score_not_saved(db):
    assert not db.save_high_score_if_higher(0)


def test_high_score_survives_reopen(tmp_path):
    path = str(tmp_path / "snake.db")
    db = SnakeDatabase(path)
    db.save_high_score_if_higher(120)
    db.close()

    db = SnakeDatabase(path)
    assert db.load_high_score() == 120
    db.close()


def test_malformed_value_reads_as_zero(db):
    db.conn.execute("INSERT INTO settings (key, value) VALUES (?, ?)", (db.key, "oops"))
    db.conn.commit()
    assert db.load_high_score() == 0


def test_unavailable_storage(tmp_path):
    db = SnakeDatabase(str(tmp_path / "no" / "such" / "dir.db"))
    assert not db.available
    assert db.load_high_score() == 0
    assert not db.save_high_score_if_higher(10)
    assert not db.record_game(10, 2, "medium")
    assert db.get_stats() == {'games': 0, 'best': 0, 'avg': 0.0}


def test_closed_connection_is_not_fatal(tmp_path):
    db = SnakeDatabase(str(tmp_path / "snake.db"))
    db.conn.close()
    assert db.load_high_score() == 0
    assert not db.save_high_score_if_higher(10)


def test_game_history_stats(db):
    db.record_game(10, 2, "slow")
    db.record_game(30, 4, "fast")

    stats = db.get_stats()
    assert stats['games'] == 2
    assert stats['best'] == 30
    assert stats['avg'] == 20.0
