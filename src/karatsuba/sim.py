# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information
""" Clocked simulation of ``RegisteredMultiplier``.

runs the gateware under the nmigen simulator, one clock edge per stimulus
entry, and samples the register after each edge.
"""

from nmigen import Module
from nmigen.back.pysim import Simulator, Settle

from karatsuba.algorithm import operand
from karatsuba.config import KaratsubaConfig
from karatsuba.registered import RegisteredMultiplier


# load, hold (with new operands presented), then load the new operands
HOLD_THEN_UPDATE = [
    (1234, 5678, True),
    (3647, 6738, False),
    (3647, 6738, True),
]


def run_stimulus(stimulus, config=None, vcd_name=None):
    """ Clock ``(x, y, enable)`` tuples through a ``RegisteredMultiplier``.

    :param stimulus: iterable of ``(x, y, enable)``, one per clock edge
    :param config: a ``KaratsubaConfig``, 16-bit by default
    :param vcd_name: if given, write ``<vcd_name>.vcd`` and ``.gtkw`` traces
    :returns: list of register values, one after each edge
    """
    if config is None:
        config = KaratsubaConfig()
    stimulus = [(operand(x, config.width), operand(y, config.width),
                 bool(enable)) for x, y, enable in stimulus]

    m = Module()
    m.submodules.dut = dut = RegisteredMultiplier(config)
    results = []

    sim = Simulator(m)
    sim.add_clock(1e-6)

    def process():
        for x, y, enable in stimulus:
            yield dut.x.eq(x)
            yield dut.y.eq(y)
            yield dut.en.eq(enable)
            yield
            yield Settle()
            results.append((yield dut.result))

    sim.add_sync_process(process)
    if vcd_name is None:
        sim.run()
    else:
        with sim.write_vcd(vcd_name + ".vcd", vcd_name + ".gtkw",
                           traces=dut.ports()):
            sim.run()
    return results
