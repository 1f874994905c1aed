from __future__ import annotations
import argparse, json, sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .discover import select_tests
from .tasks import TASKS, get_task, task_names
from .verify import VerifyConfig, run_tests

def grade_task(task: Dict[str, Any], config: Optional[VerifyConfig] = None, root: Optional[Path] = None) -> Dict[str, Any]:
    root = root or Path.cwd()
    selected = select_tests(root, {task["function"]})
    if not selected:
        selected = list(task["tests"])
    res = run_tests(selected, config=config, root=root)
    passed = res.get("returncode") == 0 and res.get("pass_frac") == 1.0
    return {
        "name": task["name"],
        "question": task["question"],
        "selected_tests": selected,
        "passed": passed,
        "pass_frac": res.get("pass_frac", 0.0),
        "returncode": res.get("returncode"),
    }

def grade_all(
    tasks: Optional[List[Dict[str, Any]]] = None,
    config: Optional[VerifyConfig] = None,
    root: Optional[Path] = None,
) -> Dict[str, Any]:
    tasks = TASKS if tasks is None else tasks
    per = [grade_task(t, config=config, root=root) for t in tasks]
    pass_count = sum(1 for r in per if r["passed"])
    score = (pass_count / len(per)) if per else 0.0
    return {"score": score, "results": per}

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="katas.grade",
        description="Grade each kata question by running the tests that exercise it.",
    )
    ap.add_argument("--task", dest="tasks", action="append", default=None,
                    help=f"Task name or question number to grade (repeatable; default all: {', '.join(task_names())})")
    ap.add_argument("--timeout", type=int, default=None, help="Per-question verifier timeout (s)")
    ap.add_argument("--json-out", dest="json_out", type=str,
                    help="Write the grade report (JSON) to this path")
    args = ap.parse_args(argv)

    try:
        tasks = [get_task(t) for t in args.tasks] if args.tasks else list(TASKS)
    except KeyError as e:
        print(f"ERROR: {e.args[0]}", file=sys.stderr)
        return 2

    try:
        config = VerifyConfig.from_env().with_timeout(args.timeout)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    report = grade_all(tasks, config=config)

    if args.json_out:
        Path(args.json_out).parent.mkdir(parents=True, exist_ok=True)
        Path(args.json_out).write_text(json.dumps(report, indent=2))

    print(json.dumps(report, indent=2))
    return 0 if all(r["passed"] for r in report["results"]) else 1

if __name__ == "__main__":
    raise SystemExit(main())
