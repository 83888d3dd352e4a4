"""Tests for the command-line host."""

import json
import logging
import pytest
from dust_sim.cli.main import main, make_parser, build_config, build_universe


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger("dust_sim").handlers.clear()


def test_run(capsys):
    """Test a short headless run."""
    code = main(["--particles", "50", "--frames", "5", "--seed", "1",
                 "--star", "400,300,1000", "--black-hole", "100,100,2000",
                 "--log-level", "WARNING"])
    
    out = capsys.readouterr().out
    assert code == 0
    assert "Simulation complete!" in out
    assert "with 50 particles" in out


def test_list_scenes(capsys):
    """Test scene listing."""
    assert main(["--list-scenes"]) == 0
    out = capsys.readouterr().out
    assert "maelstrom" in out


def test_bad_star_value():
    """Test that a malformed body triple is a usage error."""
    with pytest.raises(SystemExit) as exc:
        main(["--star", "1,2"])
    assert exc.value.code == 2


def test_config_file_with_overrides(tmp_path):
    """Test that flags override values from a config file."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps({
        "width": 300.0,
        "height": 200.0,
        "particle_count": 20,
        "scene": "binary",
        "stars": [[10.0, 10.0, 100.0]],
    }))
    args = make_parser().parse_args(["--config", str(path), "--particles", "30",
                                     "--star", "5,5,50", "--seed", "3"])
    
    config = build_config(args)
    universe = build_universe(config)
    
    assert config.width == 300.0
    assert universe.n_particles == 30
    # two binary stars, one from the file, one from the flag
    assert len(universe.stars) == 4
    assert universe.stars[-1].mass == 50.0


def test_missing_config_file(tmp_path):
    """Test that a missing config file is a usage error."""
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(tmp_path / "missing.json")])
    assert exc.value.code == 2


def test_bad_scene_params(tmp_path, capsys):
    """Test that scene parameters the scene does not accept are a usage error."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"scene": "binary", "scene_params": {"radius": 3.0}}))
    
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(path), "--particles", "5", "--frames", "1"])
    
    assert exc.value.code == 2
    assert "Simulation complete!" not in capsys.readouterr().out
