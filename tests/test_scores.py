from guess_it.models import BestScores, Difficulty


def read(path):
    return path.read_text(encoding='utf-8')


def test_load_missing_file_is_zero(file_store):
    for difficulty in Difficulty:
        assert file_store.load(difficulty) == 0


def test_load_unreadable_file_is_zero(file_store, tmp_path):
    (tmp_path / 'best_score_easy.txt').write_text('not a number', encoding='utf-8')
    (tmp_path / 'best_score_hard.txt').write_text('-4', encoding='utf-8')
    assert file_store.load(Difficulty.EASY) == 0
    assert file_store.load(Difficulty.HARD) == 0


def test_save_overwrites_only_that_difficulty(file_store, tmp_path):
    (tmp_path / 'best_score_medium.txt').write_text('6\n', encoding='utf-8')

    file_store.save(Difficulty.EASY, 9)
    file_store.save(Difficulty.EASY, 4)

    assert read(tmp_path / 'best_score_easy.txt') == '4'
    assert file_store.load(Difficulty.EASY) == 4
    assert file_store.load(Difficulty.MEDIUM) == 6
    assert file_store.load(Difficulty.HARD) == 0


def test_append_leaderboard_line_format(file_store, tmp_path):
    file_store.append_leaderboard(Difficulty.EASY, 4)
    file_store.append_leaderboard(Difficulty.HARD, 2)

    assert read(tmp_path / 'leaderboard.txt') == "Easy mode: 4 attempts\nHard mode: 2 attempts\n"


def test_leaderboard_shows_first_five_in_file_order(file_store, console):
    # Not the five best: the first five appended
    for score in (9, 8, 7, 6, 5, 1, 2):
        file_store.append_leaderboard(Difficulty.MEDIUM, score)

    file_store.display_leaderboard(console)

    assert console.output == [
        "\nLeaderboard (Top 5 entries):",
        "Medium mode: 9 attempts",
        "Medium mode: 8 attempts",
        "Medium mode: 7 attempts",
        "Medium mode: 6 attempts",
        "Medium mode: 5 attempts",
    ]


def test_leaderboard_lines_are_shown_verbatim(file_store, tmp_path, console):
    (tmp_path / 'leaderboard.txt').write_text("hand edited line\nEasy mode: 3 attempts\n", encoding='utf-8')
    file_store.display_leaderboard(console)
    assert console.output[1:] == ["hand edited line", "Easy mode: 3 attempts"]


def test_leaderboard_missing_file(file_store, console):
    file_store.display_leaderboard(console)
    assert console.output[-1] == "No leaderboard data available."


def test_leaderboard_empty_file(file_store, tmp_path, console):
    (tmp_path / 'leaderboard.txt').write_text('', encoding='utf-8')
    file_store.display_leaderboard(console)
    assert console.output[-1] == "No leaderboard data available."


def test_reset_zeroes_scores_and_empties_leaderboard(file_store, tmp_path):
    file_store.save(Difficulty.EASY, 4)
    file_store.save(Difficulty.HARD, 2)
    file_store.append_leaderboard(Difficulty.EASY, 4)

    file_store.reset()

    for name in ('best_score_easy.txt', 'best_score_medium.txt', 'best_score_hard.txt'):
        assert read(tmp_path / name) == '0'
    assert read(tmp_path / 'leaderboard.txt') == ''


def test_write_failure_is_not_raised(tmp_path):
    from guess_it.scores import FileScoreBackend, ScoreStore

    # Pointing at a directory that does not exist makes every write fail
    store = ScoreStore(FileScoreBackend(str(tmp_path / 'missing')))
    store.save(Difficulty.EASY, 3)
    store.append_leaderboard(Difficulty.EASY, 3)
    store.reset()

    assert store.load(Difficulty.EASY) == 0
    assert store.leaderboard_lines() == []


def test_memory_backend_round_trip(memory_store, memory_backend):
    memory_store.save(Difficulty.MEDIUM, 5)
    memory_store.append_leaderboard(Difficulty.MEDIUM, 5)

    assert memory_backend.best_scores == BestScores(medium=5)
    assert memory_backend.leaderboard_lines == ["Medium mode: 5 attempts"]

    memory_store.reset()
    assert memory_backend.best_scores == BestScores()
    assert memory_backend.leaderboard_lines == []


def test_load_non_utf8_file_is_zero(file_store, tmp_path):
    (tmp_path / 'best_score_easy.txt').write_bytes(b'\xff\xfe4')
    assert file_store.load(Difficulty.EASY) == 0


def test_leaderboard_with_non_utf8_bytes_still_displays(file_store, tmp_path, console):
    (tmp_path / 'leaderboard.txt').write_bytes(b'Easy mode: 4 attempts\n\xff\n')

    file_store.display_leaderboard(console)

    assert console.output[1] == "Easy mode: 4 attempts"
    assert console.output[2] == "\ufffd"
