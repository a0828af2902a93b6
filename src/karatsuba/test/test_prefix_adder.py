# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

from nmigen import Module, Signal
from nmigen.back.pysim import Simulator, Delay

from karatsuba.prefix_adder import PrefixAdder
from karatsuba.algorithm import prefix_add
import unittest
import random


class PrefixAdderTestCase(unittest.TestCase):
    def run_test(self, inputs, width=8):

        m = Module()

        m.submodules.dut = dut = PrefixAdder(width)
        a = Signal.like(dut.a)
        b = Signal.like(dut.b)

        m.d.comb += [
            dut.a.eq(a),
            dut.b.eq(b)]

        sim = Simulator(m)

        def process():
            for av, bv in inputs:
                yield a.eq(av)
                yield b.eq(bv)
                yield Delay(1e-6)
                expected_sum, expected_cout = prefix_add(av, bv, width)
                result = yield dut.sum
                msg = "sum: {}, expected {}".format(result, expected_sum)
                self.assertEqual(result, expected_sum, msg)
                result = yield dut.cout
                msg = "cout: {}, expected {}".format(result, expected_cout)
                self.assertEqual(result, expected_cout, msg)

        sim.add_process(process)
        sim.run()

    def test_selected(self):
        inputs = [(0, 0), (1, 1), (64, 64), (128, 128),
                  (255, 1), (255, 255), (4, 210), (22, 46)]
        self.run_test(inputs)

    def test_rand(self):
        inputs = [(random.randrange(256), random.randrange(256))
                  for i in range(2000)]
        self.run_test(inputs)

    def test_exhaustive_4bit(self):
        inputs = [(a, b) for a in range(16) for b in range(16)]
        self.run_test(inputs, width=4)

    def test_vcd(self):
        m = PrefixAdder()
        sim = Simulator(m)

        def process():
            yield m.a.eq(0x5A)
            yield m.b.eq(0xA6)
            yield Delay(1e-6)
            self.assertEqual((yield m.sum), 0)
            self.assertEqual((yield m.cout), 1)

        sim.add_process(process)
        with sim.write_vcd("prefix_adder.vcd", "prefix_adder.gtkw",
                           traces=m.ports()):
            sim.run()


if __name__ == "__main__":
    unittest.main()
