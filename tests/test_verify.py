import subprocess
import pytest

from katas import verify
from katas.verify import VerifyConfig, _parse_summary

def test_parse_summary_mixed():
    out = "....F.\n=== 1 failed, 5 passed in 0.12s ==="
    res = _parse_summary(out)
    assert res["passed"] == 5 and res["failed"] == 1 and res["total"] == 6
    assert abs(res["pass_frac"] - 5 / 6) < 1e-9

def test_parse_summary_counts_errors_as_failures():
    res = _parse_summary("2 passed, 1 error in 0.30s")
    assert res["failed"] == 1 and res["total"] == 3

def test_parse_summary_no_tests():
    res = _parse_summary("no tests ran in 0.01s")
    assert res == {"passed": 0, "failed": 0, "total": 0, "pass_frac": 0.0}

def test_config_from_env(monkeypatch):
    monkeypatch.setenv("KATAS_TIMEOUT", "9")
    monkeypatch.setenv("KATAS_NO_NETWORK", "false")
    cfg = VerifyConfig.from_env()
    assert cfg.timeout_s == 9 and cfg.no_network is False
    assert cfg.mem_mb == 512
    assert cfg.with_timeout(None) is cfg
    assert cfg.with_timeout(2).timeout_s == 2

def test_run_tests_builds_sandbox_command(monkeypatch, tmp_path):
    seen = {}

    def fake_run(args, **kw):
        seen["args"] = args
        seen["cwd"] = kw["cwd"]
        return subprocess.CompletedProcess(args, 0, stdout="3 passed in 0.01s\n")

    monkeypatch.setattr(verify.subprocess, "run", fake_run)
    res = verify.run_tests(["tests/test_search.py"], VerifyConfig(timeout_s=3), root=tmp_path)
    assert res["returncode"] == 0 and res["pass_frac"] == 1.0
    assert seen["cwd"] == str(tmp_path)
    assert seen["args"][1:3] == ["-m", "katas._sandbox_entry"]
    assert seen["args"][-2:] == ["--", "tests/test_search.py"]
    assert "--allow-network" not in seen["args"]

def test_run_tests_timeout(monkeypatch):
    def fake_run(args, **kw):
        raise subprocess.TimeoutExpired(args, kw["timeout"], output="..")

    monkeypatch.setattr(verify.subprocess, "run", fake_run)
    res = verify.run_tests(None, VerifyConfig(timeout_s=1))
    assert res["returncode"] == 124
    assert "TIMEOUT" in res["stdout"]

def test_timeout_ignores_partial_counts(monkeypatch):
    def fake_run(args, **kw):
        raise subprocess.TimeoutExpired(args, kw["timeout"], output="E   assert 2 failed\n")

    monkeypatch.setattr(verify.subprocess, "run", fake_run)
    res = verify.run_tests(["tests"], VerifyConfig(timeout_s=1))
    assert res["returncode"] == 124
    assert res["total"] == 0 and res["failed"] == 0 and res["pass_frac"] == 0.0

def test_run_tests_defaults_to_cwd(monkeypatch, tmp_path):
    seen = {}

    def fake_run(args, **kw):
        seen["cwd"] = kw["cwd"]
        return subprocess.CompletedProcess(args, 0, stdout="1 passed in 0.01s\n")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(verify.subprocess, "run", fake_run)
    verify.run_tests(["tests"], VerifyConfig())
    assert seen["cwd"] == str(tmp_path)

def test_bad_env_value_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.setenv("KATAS_TIMEOUT", "abc")
    with pytest.raises(ValueError, match="KATAS_TIMEOUT"):
        VerifyConfig.from_env()
    assert verify.main([]) == 2
    assert "ERROR: KATAS_TIMEOUT must be an integer" in capsys.readouterr().err
