"""Exercise the string list and write the reference output file."""

from __future__ import annotations

import sys
from collections import deque

from syslab.stringlist import StringProcList, StringProcNode

MAX_TYPE = 8
OUTPUT_FILENAME = "salida.caso.propio.ej1.txt"
CONCAT_PREFIX = "junta-constelaciones-mision-estrellas:"

_MASK = 0xFFFFFFFF
_RELEASE = "======================== Libera memoria ======================="

STARS = (
    "sol", "polaris", "rigel", "pollux", "deneb", "adhara", "betelgeuse",
    "sirio", "procyon", "altair", "achenar", "fomalhaut",
)

CONSTELLATIONS_1A = (
    "geminis", "pisis", "cefeo", "pavo", "libra", "auriga", "sagitario",
    "pavo", "crux", "cisne", "orion", "centauro", "juno", "hubble",
    "irazusta", "terra", "cassini-huygens", "artemis", "columbia", "kepler",
    "aqua", "sputnik", "insight", "messenger", "osiris", "rex", "chandra",
    "curiosity",
)

NAMES_1B = (
    "geminis", "pisis", "cefeo", "pavo", "libra", "auriga", "sagitario",
    "pavo", "crux", "sol", "polaris", "rigel", "pollux", "deneb", "adhara",
    "betelgeuse", "sirio", "cisne", "orion", "centauro", "juno", "hubble",
    "sol", "polaris", "rigel", "pollux", "deneb", "adhara", "betelgeuse",
    "sirio", "procyon", "altair", "achenar", "geminis", "pisis", "cefeo",
    "pavo", "libra", "auriga", "sagitario", "pavo", "crux", "cisne",
    "cefeo", "pavo", "libra", "auriga", "sagitario", "pavo", "crux", "cisne",
    "orion", "centauro", "juno", "hubble", "geminis", "pisis", "cefeo",
    "pavo", "libra", "auriga", "sagitario", "pavo", "crux", "cisne", "orion",
    "centauro", "juno", "hubble", "sol", "polaris", "rigel", "pollux",
    "deneb", "adhara", "betelgeuse", "sirio", "cefeo", "pavo", "libra",
    "auriga", "sagitario", "pavo", "crux", "cisne", "luna", "ganimedes",
    "titan", "calisto", "io", "europa", "luna", "oberon", "titania", "rhea",
    "tritón", "encélado", "mimas", "titán", "dione", "luna", "umbriel",
    "ariel", "miranda", "galemede", "apollo 11", "soyuz", "iss", "hubble",
    "cassini-huygens", "juno", "artemis", "chandrayaan-2", "ceres", "vesta",
    "pallas", "hygiea", "iris", "eris", "juno", "hebe", "palas", "victoria",
)


class GlibcRandom:
    """The additive-feedback generator behind the C library's rand()."""

    def __init__(self, seed: int = 1):
        seed &= _MASK
        if seed == 0:
            seed = 1
        word = seed - (1 << 32) if seed >= 1 << 31 else seed
        state = [word & _MASK]
        for _ in range(30):
            hi = abs(word) // 127773 * (-1 if word < 0 else 1)
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            state.append(word & _MASK)
        state.extend(state[:3])
        self._state = deque(state, maxlen=34)
        for _ in range(310):
            self._advance()

    def _advance(self) -> int:
        value = (self._state[-31] + self._state[-3]) & _MASK
        self._state.append(value)
        return value

    def next(self) -> int:
        """Return the next value in 0..2**31-1."""
        return self._advance() >> 1


def run_basic_checks() -> str:
    """Create, fill and concatenate a small list; return the concatenation."""
    empty = StringProcList()
    if len(empty) != 0:
        raise AssertionError("new list is not empty")
    node = StringProcNode(0, "hash")
    if (node.type, node.hash) != (0, "hash"):
        raise AssertionError("node does not hold its values")

    words = ("hola", "a", "todos!")
    lst = StringProcList()
    for word in words:
        lst.add_node(0, word)
    if [n.hash for n in lst] != list(words):
        raise AssertionError("nodes out of order")
    return lst.concat(0, "hash")


def _fill(lst: StringProcList, names, rng: GlibcRandom) -> None:
    for name in names:
        lst.add_node(rng.next() % MAX_TYPE, name)


def _block(out, text: str) -> None:
    out.write(text)
    out.write("\n")


def write_test_1a(out, rng: GlibcRandom) -> None:
    """Write the list creation and printing section."""
    _block(out, "== Ejercicio 1a ==\n")
    _block(out, "Creando lista vacia\n")
    _block(out, _RELEASE + "\n")
    _block(out, "Creando nodo vacio\n")
    StringProcNode(0, "")
    _block(out, _RELEASE + "\n")

    lst = StringProcList()
    _block(out, "Creando lista vacia\n")
    lst.print_to(out)
    out.write("\n")
    _block(out, "Agregando estrellas:\n")
    _fill(lst, STARS, rng)
    lst.print_to(out)
    out.write("\n")
    _block(out, _RELEASE + "\n")

    _block(out, "Creando lista vacia\n")
    lst = StringProcList()
    _block(out, "Agregando constelaciones y misiones:\n")
    _fill(lst, CONSTELLATIONS_1A, rng)
    lst.print_to(out)
    out.write("\n")
    _block(out, _RELEASE + "\n")
    out.write("======================== Fin del test 1a =======================")


def write_test_1b(out, rng: GlibcRandom) -> None:
    """Write the concatenation-by-type section."""
    _block(out, "== Ejercicio 1b ==\n")
    lst = StringProcList()
    _block(out, "Agregando constelaciones y misiones:\n")
    _fill(lst, NAMES_1B, rng)
    for type_ in range(MAX_TYPE):
        out.write(lst.concat(type_, CONCAT_PREFIX) + "\n")
    out.write("======================== Fin del test 1b =======================")


def main(argv=None) -> int:
    """Write the reference output; an optional argument names the output file."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if len(argv) > 1:
        print("Usage: stringdemo [output-file]", file=sys.stderr)
        return 1
    path = argv[0] if argv else OUTPUT_FILENAME
    rng = GlibcRandom(0)
    with open(path, "w", encoding="utf-8") as out:
        write_test_1a(out, rng)
        write_test_1b(out, rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())