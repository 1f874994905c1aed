import socket, sys

try:
    import resource
except ImportError:  # pragma: no cover - not available on Windows
    resource = None  # type: ignore

def _disable_network():
    class _NoNetSocket(socket.socket):
        def __init__(self, *a, **kw):
            raise RuntimeError("Network disabled in sandbox")
    socket.socket = _NoNetSocket  # type: ignore

def _set_limit(which: str, value: int) -> None:
    limit = getattr(resource, which, None) if resource is not None else None
    if limit is None:
        return
    try:
        resource.setrlimit(limit, (value, value))
    except (ValueError, OSError) as e:
        print(f"WARNING: could not set {which}: {e}", file=sys.stderr)

def _set_limits(cpu_seconds: int = 5, mem_mb: int = 512, fsize_mb: int = 100):
    _set_limit("RLIMIT_CPU", cpu_seconds)
    _set_limit("RLIMIT_AS", mem_mb * 1024 * 1024)
    _set_limit("RLIMIT_FSIZE", fsize_mb * 1024 * 1024)

def _pop_option(args, flag, default):
    if flag in args:
        i = args.index(flag)
        if i + 1 >= len(args):
            raise ValueError(f"{flag} needs a value")
        value = int(args[i + 1])
        del args[i:i + 2]
        return value
    return default

def main():
    args = sys.argv[1:]
    try:
        timeout = _pop_option(args, "--timeout", 5)
        mem_mb = _pop_option(args, "--mem-mb", 512)
        fsize_mb = _pop_option(args, "--fsize-mb", 100)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)
    allow_network = "--allow-network" in args
    if allow_network:
        args.remove("--allow-network")
    if args and args[0] == "--":
        args = args[1:]

    if not allow_network:
        _disable_network()
    _set_limits(cpu_seconds=max(1, timeout), mem_mb=mem_mb, fsize_mb=fsize_mb)

    try:
        import pytest  # type: ignore
    except ImportError as e:
        print("ERROR: pytest not installed:", e, file=sys.stderr)
        sys.exit(2)

    if not args:
        args = ["tests"]
    if "-q" not in args:
        args = ["-q"] + args

    print(f"Running PyTest {args}")
    code = pytest.main(args)
    sys.exit(int(code))

if __name__ == "__main__":
    main()
