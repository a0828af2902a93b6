# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information
"""Clock-enabled output register around the Karatsuba multiplier.

Algorithm based on ``algorithm.RegisteredMul``.
"""

from nmigen import Signal, Module, Elaboratable
from nmigen.cli import main

from karatsuba.config import KaratsubaConfig
from karatsuba.multiply import KaratsubaMultiplier


class RegisteredMultiplier(Elaboratable):
    """Registered Multiplier.

    :attribute config: the ``KaratsubaConfig``. Read-only.
    :attribute x: the first operand
    :attribute y: the second operand
    :attribute en: load enable, sampled on the clock edge
    :attribute result: the register output, reset to zero
    """

    def __init__(self, config=None):
        if config is None:
            config = KaratsubaConfig()
        self.config = config
        self.x = Signal(config.width, reset_less=True)
        self.y = Signal(config.width, reset_less=True)
        self.en = Signal(reset_less=True)
        self.result = Signal(config.product_width, reset=0)

    def elaborate(self, platform):
        m = Module()
        comb = m.d.comb
        sync = m.d.sync

        m.submodules.mul = mul = KaratsubaMultiplier(self.config)
        comb += [mul.x.eq(self.x),
                 mul.y.eq(self.y)]

        with m.If(self.en):
            sync += self.result.eq(mul.product)

        return m

    def ports(self):
        return [self.x, self.y, self.en, self.result]


if __name__ == "__main__":
    m = RegisteredMultiplier()
    main(m, ports=m.ports())
