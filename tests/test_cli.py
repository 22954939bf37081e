import logging

import pytest

import manual_sync.cli as cli
from manual_sync.workflow.synchronizer import SyncMode


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put the previous handlers back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
@pytest.mark.parametrize("argv, expected", [
    ([], SyncMode.ADD),
    (["-r"], SyncMode.REMOVE),
    (["-R"], SyncMode.REMOVE),
    (["-r", "extra"], SyncMode.ADD),
    (["--remove"], SyncMode.ADD),
    (["-x"], SyncMode.ADD),
])
def test_select_mode(argv, expected):
    assert cli.select_mode(argv) is expected


@pytest.mark.unit
def test_create_parser_ignores_unknown_arguments():
    parser = cli.create_parser()
    _, extras = parser.parse_known_args(["-r", "--whatever", "-rx"])
    assert extras == ["-r", "--whatever", "-rx"]


@pytest.mark.unit
def test_version_flag_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])
    assert exc_info.value.code == 0
    assert "manual-sync" in capsys.readouterr().out


@pytest.mark.integration
def test_main_add_run(make_system, roms_dir, monkeypatch, capsys):
    make_system("SNES", games=[("Foo.sfc", None)], manuals=["Foo.pdf"])
    make_system("NES", games=[("Bar.nes", None)])
    monkeypatch.chdir(roms_dir)

    code = cli.main([])

    assert code == 0
    out = capsys.readouterr().out
    assert "Run this program in the roms directory." in out
    assert "Added manual for SNES/Foo.sfc" in out
    assert "No manual found for NES/Bar.nes" in out
    assert "1 Manuals added to gamelist.xml" in out
    assert "0 Existing xml manual tags in gamelist.xml" in out
    assert "1 Missing manual files" in out
    assert (roms_dir / "missing_manuals.txt").read_text() == "NES/Bar.nes\n"


@pytest.mark.integration
def test_main_remove_run(make_system, roms_dir, monkeypatch, capsys):
    make_system("SNES", games=[("Foo.sfc", "./media/manuals/Foo.pdf")], manuals=["Foo.pdf"])
    monkeypatch.chdir(roms_dir)

    code = cli.main(["-R"])

    assert code == 0
    out = capsys.readouterr().out
    assert "Manual tag removed for SNES/Foo.sfc" in out
    assert "1 Manuals removed from gamelist.xml" in out
    assert "Manuals added" not in out
    assert not (roms_dir / "missing_manuals.txt").exists()


@pytest.mark.integration
def test_main_unrecognized_arguments_fall_back_to_add(roms_dir, monkeypatch, capsys):
    monkeypatch.chdir(roms_dir)

    code = cli.main(["-r", "--bogus"])

    assert code == 0
    assert "0 Manuals added to gamelist.xml" in capsys.readouterr().out
    assert (roms_dir / "missing_manuals.txt").exists()


@pytest.mark.unit
def test_main_reports_unexpected_error(monkeypatch, roms_dir, capsys):
    def boom(self, mode):
        raise OSError("disk on fire")

    monkeypatch.chdir(roms_dir)
    monkeypatch.setattr(cli.ManualSynchronizer, "run", boom)

    code = cli.main([])

    assert code == 1
    assert "Fatal error: disk on fire" in capsys.readouterr().err
