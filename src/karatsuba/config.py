# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information
""" Bit-width configuration for the Karatsuba multiplier.

All widths are derived from the operand width, so that the reference model
and the gateware agree on every intermediate signal.
"""


class KaratsubaConfig:
    """ Configuration for the split (Karatsuba) multiplier.

    :attribute width: operand bit-width.
    :attribute half_width: bit-width of each operand half.
    :attribute sum_width: bit-width of a half-sum (sum plus carry-out).
    :attribute ext_width: width the half-sums are zero-extended to before
        the cross multiply.
    :attribute cross_width: bit-width of the cross product and of the
        cross term after subtracting the partial products.
    :attribute keep_width: number of low bits of the cross term which take
        part in recombination.
    :attribute product_width: bit-width of the final product.
    """

    def __init__(self, width=16, full_cross=False):
        """ Create a ``KaratsubaConfig`` instance.

        :param width: operand bit-width, must be even
        :param full_cross: keep the whole cross term when recombining,
            instead of only its low ``width`` bits
        """
        if not isinstance(width, int) or width < 2 or width % 2:
            raise ValueError("width must be an even number of bits >= 2")
        self.width = width
        self.full_cross = full_cross
        self.half_width = width // 2
        self.sum_width = self.half_width + 1
        self.ext_width = width
        self.cross_width = 2 * self.sum_width
        self.product_width = 2 * width
        if full_cross:
            self.keep_width = self.cross_width
        else:
            self.keep_width = width

    def __repr__(self):
        return f"KaratsubaConfig({self.width}, full_cross={self.full_cross})"
