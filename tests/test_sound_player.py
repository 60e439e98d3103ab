import pytest

from halloween_ninja.checks import CheckError
from halloween_ninja.rng import Random
from halloween_ninja.sound_player import SoundPlayer, load_sound


@pytest.fixture
def media(tmp_path):
    (tmp_path / "jump-1.ogg").write_bytes(b"data")
    (tmp_path / "jump-2.wav").write_bytes(b"data")
    (tmp_path / "readme.txt").write_bytes(b"data")
    (tmp_path / "music.mp3").write_bytes(b"data")
    sub = tmp_path / "more"
    sub.mkdir()
    (sub / "squish.flac").write_bytes(b"data")
    return tmp_path


@pytest.fixture
def player(media):
    return SoundPlayer(Random(1), media_path=media)


def _names(player):
    return sorted(effect.filename for effect in player.effects)


def test_defaults(player):
    assert player.volume == 50.0
    assert not player.is_muted
    assert player.effects == ()


def test_load_all_finds_supported_files_recursively(player):
    player.load_all()
    assert _names(player) == ["jump-1.ogg", "jump-2.wav", "squish.flac"]


def test_load_by_prefix(player):
    assert player.load("jump")
    assert _names(player) == ["jump-1.ogg", "jump-2.wav"]


def test_load_twice_does_not_duplicate(player):
    assert player.load("jump")
    assert player.load("jump")
    assert len(player.effects) == 2


def test_load_several_names(player):
    assert player.load("jump", "squish")
    assert len(player.effects) == 3


def test_load_unknown_name_raises(player):
    with pytest.raises(CheckError):
        player.load("nothing")


def test_load_empty_name_raises(player):
    with pytest.raises(CheckError):
        player.load("")


def test_missing_media_path_raises(tmp_path):
    player = SoundPlayer(Random(1), media_path=tmp_path / "absent")
    with pytest.raises(CheckError):
        player.load_all()


def test_play_plays_a_matching_sound(player):
    player.load("jump", "squish")
    player.play("jump", 1.5)
    playing = [e for e in player.effects if e.sound.is_playing]
    assert len(playing) == 1
    assert playing[0].filename.startswith("jump")
    assert playing[0].sound.pitch == 1.5


def test_play_loads_on_demand(player):
    player.play("squish")
    assert _names(player) == ["squish.flac"]
    assert player.effects[0].sound.is_playing


def test_play_unknown_raises(player):
    with pytest.raises(CheckError):
        player.play("nothing")


def test_play_empty_name_does_nothing(player):
    player.load_all()
    player.play("")
    assert not any(e.sound.is_playing for e in player.effects)


def test_looping_sound_is_not_restarted(player):
    player.load("squish")
    player.will_loop("squish", True)
    player.play("squish")
    player.play("squish")
    assert player.effects[0].sound.play_count == 1


def test_will_loop_empty_name_raises(player):
    with pytest.raises(CheckError):
        player.will_loop("", True)


def test_stop_all_looped_only_stops_looped(player):
    player.load("jump", "squish")
    player.will_loop("squish", True)
    for effect in player.effects:
        effect.sound.play()
    player.stop_all_looped()
    state = {e.filename: e.sound.is_playing for e in player.effects}
    assert state == {"jump-1.ogg": True, "jump-2.wav": True, "squish.flac": False}


def test_stop_by_name_and_reset(player):
    player.load_all()
    for effect in player.effects:
        effect.sound.play()
    player.stop("jump")
    assert [e.sound.is_playing for e in player.effects if e.filename.startswith("jump")] == [
        False,
        False,
    ]
    player.reset()
    assert player.effects == ()


def test_set_volume_clamps_and_applies(player):
    player.load_all()
    player.set_volume(150.0)
    assert player.volume == 100.0
    assert all(e.sound.volume == 100.0 for e in player.effects)
    player.set_volume(-5.0)
    assert player.volume == 0.0


def test_volume_down_steps_by_a_tenth(player):
    before = player.volume
    player.volume_down()
    assert player.volume == before - SoundPlayer.VOLUME_INC


def test_volume_up_goes_to_first_step(player):
    player.volume_up()
    assert player.volume == SoundPlayer.VOLUME_MIN + SoundPlayer.VOLUME_INC


def test_mute_silences_playback(player):
    player.load("jump")
    player.mute_button()
    assert player.is_muted
    assert player.volume == 0.0
    player.volume_down()
    assert player.volume == 0.0
    player.play("jump")
    assert not any(e.sound.is_playing for e in player.effects)


def test_sounds_loaded_while_muted_are_silent(player):
    player.mute_button()
    player.load("squish")
    assert player.effects[0].sound.volume == 0.0


def test_failing_loader_raises(media):
    player = SoundPlayer(Random(1), loader=lambda path: None, media_path=media)
    with pytest.raises(CheckError):
        player.load_all()


def test_default_loader_rejects_empty_file(tmp_path):
    empty = tmp_path / "empty.ogg"
    empty.write_bytes(b"")
    assert load_sound(empty) is None
    assert load_sound(tmp_path / "missing.ogg") is None
    with pytest.raises(CheckError):
        SoundPlayer(Random(1), media_path=tmp_path).load_all()