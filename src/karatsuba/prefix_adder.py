# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information
"""Generate/Propagate Prefix Adder.

Algorithm based on ``algorithm.prefix_add``.
"""

from nmigen import Signal, Module, Elaboratable, Cat, Const


class PrefixAdder(Elaboratable):
    """Prefix Adder.

    :attribute width: the bit width of the inputs and the sum. Read-only.
    :attribute a: the first input
    :attribute b: the second input
    :attribute sum: the sum output
    :attribute cout: the carry out of the most significant bit

    The carry into each bit is ``(P[i-1] & C[i-1]) | G[i-1]``, expanded
    serially from a zero carry-in.  Each carry is a separately-named
    signal so that it shows up in the traces.
    """

    def __init__(self, width=8):
        """Create a ``PrefixAdder``.

        :param width: the bit width of the inputs and the sum
        """
        self.width = width
        self.a = Signal(width, reset_less=True)
        self.b = Signal(width, reset_less=True)
        self.sum = Signal(width, reset_less=True)
        self.cout = Signal(reset_less=True)

    def elaborate(self, platform):
        """Elaborate this module."""
        m = Module()
        comb = m.d.comb

        g = Signal(self.width, reset_less=True)
        p = Signal(self.width, reset_less=True)
        comb += g.eq(self.a & self.b)
        comb += p.eq(self.a ^ self.b)

        carries = [Const(0, 1)]
        for i in range(1, self.width + 1):
            c = Signal(name="c%d" % i, reset_less=True)
            comb += c.eq((p[i-1] & carries[i-1]) | g[i-1])
            carries.append(c)

        comb += self.sum.eq(p ^ Cat(*carries[:self.width]))
        comb += self.cout.eq(carries[self.width])
        return m

    def ports(self):
        return [self.a, self.b, self.sum, self.cout]
