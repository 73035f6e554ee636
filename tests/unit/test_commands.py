from app.state import Difficulty, GameMode, GameStatus
from services.commands import Commands


def test_change_mode_to_custom_needs_text_first(ready_engine):
    commands = Commands(ready_engine)
    generation = ready_engine.generation

    assert commands.change_mode(GameMode.CUSTOM) is False
    assert ready_engine.generation == generation
    assert ready_engine.config.mode is GameMode.TIME


def test_change_mode_resets(ready_engine, loader):
    commands = Commands(ready_engine)

    assert commands.change_mode(GameMode.WORDS) is True
    assert ready_engine.status is GameStatus.LOADING
    assert loader.requests[-1] == (ready_engine.generation, ready_engine.config.word_count)


def test_set_custom_text(ready_engine):
    commands = Commands(ready_engine)

    assert commands.set_custom_text("   ") is False
    assert commands.set_custom_text("type me") is True
    assert ready_engine.config.mode is GameMode.CUSTOM
    assert ready_engine.text == "type me"


def test_restart_in_custom_mode_keeps_custom_text(ready_engine, loader):
    commands = Commands(ready_engine)
    commands.set_custom_text("type me")
    ready_engine.handle_input("ty")
    requests_before = list(loader.requests)

    commands.restart_with_new_text()

    assert ready_engine.status is GameStatus.IDLE
    assert ready_engine.text == "type me"
    assert ready_engine.input == ""
    assert loader.requests == requests_before


def test_retry_keeps_text(ready_engine):
    commands = Commands(ready_engine)
    ready_engine.handle_input("hello world")

    commands.reset_to_idle_same_text()

    assert ready_engine.status is GameStatus.IDLE
    assert ready_engine.text == "hello world"


def test_option_changes(ready_engine, loader):
    commands = Commands(ready_engine)

    commands.change_difficulty(Difficulty.ADVANCED)
    commands.change_time(60)
    loader.deliver("x")
    commands.change_word_count(50)

    cfg = ready_engine.config
    assert (cfg.difficulty, cfg.time_limit, cfg.word_count) == (Difficulty.ADVANCED, 60, 50)
    assert ready_engine.time_left == 60
