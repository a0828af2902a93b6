# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information
"""Split (Karatsuba) Integer Multiplication.

Three half-width multiplies instead of four: the high and low halves are
multiplied directly, and the cross term is the product of the half-sums
minus those two partial products.

Algorithm based on ``algorithm.KaratsubaMul``.
"""

from nmigen import Signal, Module, Elaboratable, Cat
from nmigen.cli import main

from karatsuba.config import KaratsubaConfig
from karatsuba.prefix_adder import PrefixAdder


class KaratsubaMultiplier(Elaboratable):
    """Karatsuba Multiplier.

    :attribute config: the ``KaratsubaConfig``. Read-only.
    :attribute x: the first operand
    :attribute y: the second operand
    :attribute product: the product output

    Every intermediate is a signal of exactly the width the algorithm
    states, so that assignment truncation does the wraparound:

    p1      : x_hi * y_hi                   (width bits)
    p2      : x_lo * y_lo                   (width bits)
    ab_sum  : cout:sum of x_hi + x_lo       (sum_width bits)
    p3_mult : ext(ab_sum) * ext(cd_sum)     (cross_width bits)
    p3_temp : p3_mult - p1 - p2             (cross_width bits)
    cross   : p3_temp[:keep_width]
    product : p1 << width + cross << half + p2
    """

    def __init__(self, config=None):
        """Create a ``KaratsubaMultiplier``.

        :param config: a ``KaratsubaConfig``, 16-bit by default
        """
        if config is None:
            config = KaratsubaConfig()
        self.config = config
        self.x = Signal(config.width, reset_less=True)
        self.y = Signal(config.width, reset_less=True)
        self.product = Signal(config.product_width, reset_less=True)

    def elaborate(self, platform):
        """Elaborate this module."""
        m = Module()
        comb = m.d.comb
        cfg = self.config
        half = cfg.half_width

        x_hi, x_lo = self.x[half:], self.x[:half]
        y_hi, y_lo = self.y[half:], self.y[:half]

        # partial products
        p1 = Signal(cfg.width, reset_less=True)
        p2 = Signal(cfg.width, reset_less=True)
        comb += p1.eq(x_hi * y_hi)
        comb += p2.eq(x_lo * y_lo)

        # half-sums
        m.submodules.add_x = add_x = PrefixAdder(half)
        m.submodules.add_y = add_y = PrefixAdder(half)
        comb += [add_x.a.eq(x_hi), add_x.b.eq(x_lo),
                 add_y.a.eq(y_hi), add_y.b.eq(y_lo)]
        ab_sum = Signal(cfg.sum_width, reset_less=True)
        cd_sum = Signal(cfg.sum_width, reset_less=True)
        comb += ab_sum.eq(Cat(add_x.sum, add_x.cout))
        comb += cd_sum.eq(Cat(add_y.sum, add_y.cout))

        # cross term
        ab_ext = Signal(cfg.ext_width, reset_less=True)
        cd_ext = Signal(cfg.ext_width, reset_less=True)
        comb += ab_ext.eq(ab_sum)
        comb += cd_ext.eq(cd_sum)
        p3_mult = Signal(cfg.cross_width, reset_less=True)
        p3_temp = Signal(cfg.cross_width, reset_less=True)
        cross = Signal(cfg.keep_width, reset_less=True)
        comb += p3_mult.eq(ab_ext * cd_ext)
        comb += p3_temp.eq(p3_mult - p1 - p2)
        comb += cross.eq(p3_temp)

        # recombine
        comb += self.product.eq((p1 << cfg.width) + (cross << half) + p2)
        return m

    def ports(self):
        return [self.x, self.y, self.product]


if __name__ == "__main__":
    m = KaratsubaMultiplier()
    main(m, ports=m.ports())
