"""
bdface.base.binary - binary utilities

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


###############################################################################
# packed bits to intensity samples

# supported range of bits per sample
MAX_BITS_PER_PIXEL = 8


def intensity_table(bits_per_pixel):
    """Map each `bits_per_pixel`-bit value to an 8-bit intensity."""
    if not 1 <= bits_per_pixel <= MAX_BITS_PER_PIXEL:
        raise ValueError(f'Unsupported bit depth: {bits_per_pixel}')
    top = 2**bits_per_pixel - 1
    return bytes(round(_v * 255 / top) for _v in range(top + 1))


# scaling tables, built once
_INTENSITIES = {
    _bpp: intensity_table(_bpp)
    for _bpp in range(1, MAX_BITS_PER_PIXEL + 1)
}


def unpack_row(byteseq, width, bits_per_pixel=1):
    """
    Convert one row of packed bits to `width` 8-bit intensity samples.

    byteseq: bytes holding at least width * bits_per_pixel bits, msb first
    width: number of pixels to extract; trailing padding bits are ignored
    bits_per_pixel: bit depth of the packed samples, 1 to 8 (default: 1)
    """
    try:
        scale = _INTENSITIES[bits_per_pixel]
    except KeyError:
        raise ValueError(f'Unsupported bit depth: {bits_per_pixel}') from None
    nbits = width * bits_per_pixel
    available = 8 * len(byteseq)
    if available < nbits:
        raise ValueError(
            f'Row holds {available} bits, '
            f'need {nbits} for {width} pixels at {bits_per_pixel} bpp'
        )
    if not width:
        return b''
    # drop the padding, then read samples from the right-hand end
    value = int.from_bytes(byteseq, 'big') >> (available - nbits)
    mask = (1 << bits_per_pixel) - 1
    return bytes(
        scale[(value >> ((width - 1 - _i) * bits_per_pixel)) & mask]
        for _i in range(width)
    )
