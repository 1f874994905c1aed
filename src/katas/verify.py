from __future__ import annotations
import json, os, re, subprocess, sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

PYTHON_EXE = sys.executable

_COUNT_RE = re.compile(r"(\d+)\s+(passed|failed|error|errors|skipped|xfailed|xpassed)", re.I)

def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

@dataclass(frozen=True)
class VerifyConfig:
    timeout_s: int = 5
    mem_mb: int = 512
    fsize_mb: int = 100
    no_network: bool = True

    @classmethod
    def from_env(cls) -> "VerifyConfig":
        """Defaults overridden by KATAS_TIMEOUT / KATAS_MEM_MB / KATAS_FSIZE_MB / KATAS_NO_NETWORK."""
        base = cls()
        return cls(
            timeout_s=_env_int("KATAS_TIMEOUT", base.timeout_s),
            mem_mb=_env_int("KATAS_MEM_MB", base.mem_mb),
            fsize_mb=_env_int("KATAS_FSIZE_MB", base.fsize_mb),
            no_network=os.environ.get("KATAS_NO_NETWORK", "1").lower() not in ("0", "false", "no"),
        )

    def with_timeout(self, timeout_s: Optional[int]) -> "VerifyConfig":
        return self if timeout_s is None else replace(self, timeout_s=timeout_s)

def _parse_summary(text: str) -> Dict[str, Any]:
    # Look from the bottom up for pytest's summary line
    passed = failed = 0
    for line in text.splitlines()[::-1]:
        pairs = _COUNT_RE.findall(line)
        if not pairs:
            continue
        for num, label in pairs:
            lab = label.lower()
            if lab == "passed":
                passed = int(num)
            elif lab in ("failed", "error", "errors"):
                failed += int(num)
        break
    total = passed + failed
    pass_frac = (passed / total) if total else 0.0
    return {"passed": passed, "failed": failed, "total": total, "pass_frac": pass_frac}

def run_tests(
    tests: Optional[List[str]] = None,
    config: Optional[VerifyConfig] = None,
    root: Optional[Path] = None,
) -> Dict[str, Any]:
    """Run pytest inside a restricted child process. Returns structured results.

    Args:
        tests: Optional list of pytest node ids (e.g., ['tests/test_word_count.py::test_empty']).
        config: Resource limits; defaults to ``VerifyConfig.from_env()``.
        root: Directory the node ids are relative to (the current directory by default).

    Returns:
        dict with keys: pass_frac, passed, failed, total, stdout, returncode.
    """
    cfg = config or VerifyConfig.from_env()
    args = [
        PYTHON_EXE, "-m", "katas._sandbox_entry",
        "--timeout", str(cfg.timeout_s),
        "--mem-mb", str(cfg.mem_mb),
        "--fsize-mb", str(cfg.fsize_mb),
    ]
    if not cfg.no_network:
        args.append("--allow-network")
    if tests:
        args += ["--"] + tests

    try:
        cp = subprocess.run(
            args,
            cwd=str(root or Path.cwd()),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=max(1, cfg.timeout_s + 1),
            text=True,
        )
        out = cp.stdout
        rc = cp.returncode
    except subprocess.TimeoutExpired as e:
        partial = e.stdout or ""
        if isinstance(partial, bytes):
            partial = partial.decode(errors="replace")
        out = partial + "\nTIMEOUT: verifier exceeded wall clock."
        rc = 124

    # partial output after a timeout has no summary line to trust
    summary = _parse_summary(out if rc != 124 else "")
    summary.update({"stdout": out, "returncode": rc})
    return summary

def _tail(s: str, n: int) -> str:
    if not s:
        return ""
    return "\n".join(s.splitlines()[-n:])

def _print_cli(res: Dict[str, Any], tail_lines: int = 10) -> None:
    print(json.dumps(
        {
            "pass_frac": round(res.get("pass_frac", 0.0), 3),
            "passed": res.get("passed"),
            "failed": res.get("failed"),
            "total": res.get("total"),
            "returncode": res.get("returncode"),
        },
        indent=2,
    ))
    print("\n--- pytest tail ---\n" + _tail(res.get("stdout", ""), tail_lines))

def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    ap = argparse.ArgumentParser(prog="katas.verify", description="Run the kata tests in a sandboxed pytest process.")
    ap.add_argument("--tests", nargs="*", default=None, help="PyTest node ids")
    ap.add_argument("--timeout", type=int, default=None, help="Wall/CPU timeout in seconds (default: KATAS_TIMEOUT or 5)")
    args = ap.parse_args(argv)

    try:
        config = VerifyConfig.from_env().with_timeout(args.timeout)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    res = run_tests(args.tests, config)
    _print_cli(res)
    return 0 if res.get("failed", 1) == 0 and res.get("returncode", 1) == 0 else 1

if __name__ == "__main__":
    raise SystemExit(main())
