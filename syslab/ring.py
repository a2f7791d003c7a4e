"""Pass a value around a ring of processes, each one adding one to it."""

from __future__ import annotations

import multiprocessing
import re
import sys

_TIMEOUT = 30.0
_USAGE = "Uso: anillo <n> <c> <s>"
_INVALID = "Parámetros inválidos: n >= 3, 0 <= inicio < n"


class RingError(Exception):
    """Raised when the ring cannot be set up or a value is lost on the way."""


def _receive(conn, what: str):
    if not conn.poll(_TIMEOUT):
        raise RingError(f"timed out waiting for {what}")
    try:
        return conn.recv()
    except (EOFError, OSError) as exc:
        raise RingError(f"error reading {what}") from exc


def _ring_member(index: int, source, sink, log) -> None:
    try:
        value = _receive(source, f"the ring (process {index})")
    except RingError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)
    value += 1
    try:
        log.send(f"Hijo {index} recibió y aumentó el valor a: {value}")
        sink.send(value)
    except OSError:
        print(f"Error al escribir al siguiente (proceso {index})", file=sys.stderr)
        sys.exit(1)
    finally:
        for conn in (source, sink, log):
            conn.close()


def run_ring(n: int, value: int, start: int, out=None) -> int:
    """Send ``value`` from process ``start`` around a ring of ``n`` processes.

    Each process increments the value once; the value that comes back to the
    parent is returned.
    """
    out = out if out is not None else sys.stdout
    if n < 3 or start < 0 or start >= n:
        raise RingError(_INVALID)

    print(
        f"Se crearán {n} procesos, se enviará el caracter {value} "
        f"desde proceso {start} (índice 0)",
        file=out,
        flush=True,
    )

    ctx = multiprocessing.get_context()
    ring = [ctx.Pipe(duplex=False) for _ in range(n)]
    logs = [ctx.Pipe(duplex=False) for _ in range(n)]
    start_recv, start_send = ctx.Pipe(duplex=False)
    end_recv, end_send = ctx.Pipe(duplex=False)
    last = (start - 1 + n) % n

    processes = []
    for index in range(n):
        source = start_recv if index == start else ring[index][0]
        sink = end_send if index == last else ring[(index + 1) % n][1]
        proc = ctx.Process(
            target=_ring_member, args=(index, source, sink, logs[index][1])
        )
        proc.start()
        processes.append(proc)

    for recv_end, send_end in ring:
        recv_end.close()
        send_end.close()
    for _, send_end in logs:
        send_end.close()
    start_recv.close()
    end_send.close()

    try:
        try:
            start_send.send(value)
        except OSError as exc:
            raise RingError("Error al enviar valor inicial") from exc
        finally:
            start_send.close()

        for offset in range(n):
            index = (start + offset) % n
            print(_receive(logs[index][0], f"the report of process {index}"),
                  file=out, flush=True)

        final = _receive(end_recv, "the final value")
    finally:
        end_recv.close()
        for recv_end, _ in logs:
            recv_end.close()
        for proc in processes:
            proc.join(_TIMEOUT)
            if proc.is_alive():
                proc.terminate()
                proc.join()

    print(f"Valor final recibido por el padre: {final}", file=out)
    print("Todos los procesos han terminado. :) ", file=out, flush=True)
    return final


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv=None) -> int:
    """Command-line entry point: ``ring <n> <c> <s>``; returns the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if len(argv) != 3:
        print(_USAGE, file=sys.stderr)
        return 1
    n, value, start = (_atoi(arg) for arg in argv)
    try:
        run_ring(n, value, start)
    except RingError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())