from make_gradients import main


def _svgs(path):
    return sorted(p.name for p in path.glob("*.svg"))


def test_greys_only_writes_three_files(tmp_path, capsys):
    assert main(["-s", "approx_nes", "--outdir", str(tmp_path), "--greys-only"]) == 0
    assert _svgs(tmp_path) == [
        "approx_nes_hilite.svg",
        "approx_nes_mid.svg",
        "approx_nes_shadow.svg",
    ]
    out = capsys.readouterr().out
    assert "=== Approx NES ===" in out
    assert "Files: 3" in out


def test_full_palette(tmp_path):
    assert main(["-s", "composite_08_ega", "--outdir", str(tmp_path)]) == 0
    names = _svgs(tmp_path)
    assert len(names) == (1 + 6) * 5
    assert "composite_08_ega_greys_deep_shadow.svg" in names
    assert "composite_08_ega_hue_06_deep_hilite.svg" in names


def test_outdir_is_created(tmp_path):
    out = tmp_path / "nested" / "dir"
    assert main(["-s", "cga1_extended_16", "--outdir", str(out), "--three-tone"]) == 0
    assert len(_svgs(out)) == 3 * 3
    assert (out / "cga1_extended_16_magenta_hilite.svg").exists()


def test_preview_written(tmp_path):
    assert main(["-s", "nes", "--outdir", str(tmp_path), "--preview"]) == 0
    assert (tmp_path / "nes_preview.png").exists()


def test_three_tone_warns_when_redundant(tmp_path, capsys):
    assert main(["-s", "approx_nes", "--outdir", str(tmp_path), "--three-tone"]) == 0
    assert "[warn]" in capsys.readouterr().out


def test_debug_lists_files(tmp_path, capsys):
    main(["-s", "approx_nes", "--outdir", str(tmp_path), "--greys-only", "--debug"])
    assert "[debug] wrote approx_nes_mid.svg (4 stops)" in capsys.readouterr().out


def test_unknown_source(tmp_path, capsys):
    assert main(["-s", "bogus", "--outdir", str(tmp_path)]) == 2
    assert "[error] unknown source 'bogus'" in capsys.readouterr().err
    assert _svgs(tmp_path) == []


def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "ega_extended_32" in out
    assert "composite_16_1x_rotated" in out


def test_capacity_error_exits_with_one(tmp_path, capsys, monkeypatch):
    from composite_gradients.core_types import SourceProfile
    from composite_gradients.sources import SOURCES, swept_hues
    from composite_gradients.voltage_tables import voltage_table

    too_many_hues = SourceProfile(
        name="too_many_hues",
        display_name="Too Many Hues",
        table=voltage_table(6),
        hues=swept_hues(10.0, 0.0),
        grey_band="leading",
    )
    monkeypatch.setitem(SOURCES, "too_many_hues", too_many_hues)
    assert main(["-s", "too_many_hues", "--outdir", str(tmp_path)]) == 1
    assert "[error] palette 'too_many_hues'" in capsys.readouterr().err
    assert _svgs(tmp_path) == []


def test_window_error_exits_with_one(tmp_path, capsys, monkeypatch):
    from composite_gradients.core_types import SourceProfile
    from composite_gradients.sources import SOURCES, swept_hues
    from composite_gradients.tone_windows import WINDOW_TABLE
    from composite_gradients.voltage_tables import voltage_table

    # an 8-level table filed under the 16-level windows
    mislabelled = SourceProfile(
        name="mislabelled",
        display_name="Mislabelled",
        table=voltage_table(8),
        hues=swept_hues(90.0, 0.0),
        grey_band="leading",
    )
    monkeypatch.setitem(SOURCES, "mislabelled", mislabelled)
    monkeypatch.setitem(WINDOW_TABLE, 8, WINDOW_TABLE[16])
    assert main(["-s", "mislabelled", "--outdir", str(tmp_path)]) == 1
    assert "does not fit" in capsys.readouterr().err
    assert _svgs(tmp_path) == []
