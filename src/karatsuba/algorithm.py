# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

""" Algorithms for the registered Karatsuba multiplier.

code for simulating/testing the prefix adder, the split multiplier and the
output register.  every intermediate value is wrapped to the same width as
the corresponding signal in the gateware, so results match bit-for-bit.
"""

from nmigen.hdl.ast import Const

from karatsuba.config import KaratsubaConfig


def operand(value, width):
    """ Check that ``value`` is an unsigned ``width``-bit integer.

    :returns: ``value`` unchanged
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"operand must be an int, not {type(value).__name__}")
    if value < 0 or value >= (1 << width):
        raise ValueError(f"operand {value} doesn't fit in {width} bits")
    return value


def bit(value, index):
    return (value >> index) & 1


def prefix_add(a, b, width=8, log=False):
    """ Add two unsigned integers using generate/propagate carries.

    the carries follow the recurrence ``C[i] = (P[i-1] & C[i-1]) | G[i-1]``
    starting from ``C[0] = 0``; the carry-out is the next step of the same
    recurrence, out of the most significant bit.

    :returns: ``(sum, carry_out)``, ``sum`` being ``width`` bits
    """
    a = Const.normalize(a, (width, False))
    b = Const.normalize(b, (width, False))
    g = [bit(a, i) & bit(b, i) for i in range(width)]
    p = [bit(a, i) ^ bit(b, i) for i in range(width)]
    c = [0]
    for i in range(1, width + 1):
        c.append((p[i-1] & c[i-1]) | g[i-1])
    total = 0
    for i in range(width):
        total |= (p[i] ^ c[i]) << i
    if log:
        print("g: {}, p: {}".format(g, p))
        print("c: {}, sum: {}, cout: {}".format(c, total, c[width]))
    return total, c[width]


def add8(a, b):
    """ 8-bit prefix add, returns ``(sum, carry_out)``. """
    return prefix_add(a, b, 8)


class KaratsubaMul:
    """ Unsigned split multiplication using three half-width products.

    :attribute config: the ``KaratsubaConfig``
    :attribute x: the first operand
    :attribute y: the second operand
    :attribute p1: product of the high halves
    :attribute p2: product of the low halves
    :attribute ab_sum: sum of the halves of ``x``, including carry-out
    :attribute cd_sum: sum of the halves of ``y``, including carry-out
    :attribute p3_mult: product of the two half-sums
    :attribute p3_temp: ``p3_mult - p1 - p2`` wrapped to ``cross_width``
    :attribute cross: the low ``keep_width`` bits of ``p3_temp``
    :attribute product: the recombined product, or None until calculated
    """

    def __init__(self, x, y, config=None):
        """ Create a ``KaratsubaMul``.

        :param x: the first operand
        :param y: the second operand
        :param config: a ``KaratsubaConfig``, 16-bit by default
        """
        if config is None:
            config = KaratsubaConfig()
        self.config = config
        self.x = Const.normalize(x, (config.width, False))
        self.y = Const.normalize(y, (config.width, False))
        self.p1 = self.p2 = None
        self.ab_sum = self.cd_sum = None
        self.p3_mult = self.p3_temp = self.cross = None
        self.product = None

    def split(self, value):
        """ Split ``value`` into its ``(high, low)`` halves. """
        half = self.config.half_width
        return value >> half, Const.normalize(value, (half, False))

    def half_sum(self, value):
        """ Add the two halves of ``value`` with the prefix adder. """
        hi, lo = self.split(value)
        total, carry = prefix_add(hi, lo, self.config.half_width)
        return (carry << self.config.half_width) | total

    @property
    def underflowed(self):
        """ True if the cross term subtraction wrapped around. """
        return self.p3_mult < self.p1 + self.p2

    def calculate(self, log=False):
        """ Calculate the product.

        :returns: self
        """
        cfg = self.config
        x_hi, x_lo = self.split(self.x)
        y_hi, y_lo = self.split(self.y)
        self.p1 = x_hi * y_hi
        self.p2 = x_lo * y_lo
        self.ab_sum = self.half_sum(self.x)
        self.cd_sum = self.half_sum(self.y)
        assert self.ab_sum < (1 << cfg.sum_width)
        assert self.cd_sum < (1 << cfg.sum_width)

        ab_ext = Const.normalize(self.ab_sum, (cfg.ext_width, False))
        cd_ext = Const.normalize(self.cd_sum, (cfg.ext_width, False))
        self.p3_mult = Const.normalize(ab_ext * cd_ext,
                                       (cfg.cross_width, False))
        self.p3_temp = Const.normalize(self.p3_mult - self.p1 - self.p2,
                                       (cfg.cross_width, False))
        self.cross = Const.normalize(self.p3_temp, (cfg.keep_width, False))

        product = ((self.p1 << cfg.width)
                   + (self.cross << cfg.half_width)
                   + self.p2)
        self.product = Const.normalize(product, (cfg.product_width, False))
        if log:
            print("x: {} = {}:{}, y: {} = {}:{}".format(
                self.x, x_hi, x_lo, self.y, y_hi, y_lo))
            print("p1: {}, p2: {}".format(self.p1, self.p2))
            print("ab_sum: {}, cd_sum: {}, p3_mult: {}".format(
                self.ab_sum, self.cd_sum, self.p3_mult))
            print("p3_temp: {}, cross: {}, product: {}".format(
                self.p3_temp, self.cross, self.product))
        return self


def multiply16(x, y):
    """ Multiply two 16-bit operands, returning the 32-bit product. """
    operand(x, 16)
    operand(y, 16)
    return KaratsubaMul(x, y).calculate().product


class RegisteredMul:
    """ Clock-enabled output register around ``KaratsubaMul``.

    :attribute config: the ``KaratsubaConfig``
    :attribute result: the register contents
    """

    def __init__(self, config=None, reset=0):
        if config is None:
            config = KaratsubaConfig()
        self.config = config
        self.result = operand(reset, config.product_width)

    def tick(self, x, y, enable):
        """ Advance by one clock edge.

        loads the product of ``x`` and ``y`` if ``enable`` is set,
        otherwise holds the previous value.
        """
        operand(x, self.config.width)
        operand(y, self.config.width)
        if enable:
            self.result = KaratsubaMul(x, y, self.config).calculate().product

    def current_result(self):
        return self.result
