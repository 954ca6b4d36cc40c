# pdfcore

Building blocks for reading PDF files in Python: decoders for the
standard stream filters, the common color spaces, the RC4 and AES
primitives used by PDF encryption, and the byte-level helpers a PDF
tokenizer needs.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Stream filters

Every decoder takes the raw bytes of a stream and returns the decoded
bytes. Decoders that accept decode parameters take them as a plain
mapping of the stream's `DecodeParms` entries (for example
`{"Predictor": 12, "Columns": 4}`).

```python
import zlib

from pdfcore.filters.ascii85 import ascii85_decode
from pdfcore.filters.ascii_hex import ascii_hex_decode
from pdfcore.filters.registry import apply_filter

ascii85_decode(b"87cURD]j7BEbo80~>")          # b"Hello world!"
ascii_hex_decode(b"48656c6c6f20776f726c64>")   # b"Hello world"

# One PNG-predicted row: filter type 0 followed by four bytes.
compressed = zlib.compress(b"\x00abcd")
apply_filter("FlateDecode", compressed, {"Predictor": 12, "Columns": 4})  # b"abcd"
```

`apply_filter(name, data, params)` accepts the full filter names and
their abbreviations:

| Name | Abbreviation | Decoder |
| --- | --- | --- |
| `ASCIIHexDecode` | `AHx` | `pdfcore.filters.ascii_hex.ascii_hex_decode` |
| `ASCII85Decode` | `A85` | `pdfcore.filters.ascii85.ascii85_decode` |
| `LZWDecode` | `LZW` | `pdfcore.filters.lzw.lzw_decode` |
| `FlateDecode` | `Fl` | `pdfcore.filters.flate.flate_decode` |
| `RunLengthDecode` | `RL` | `pdfcore.filters.run_length.run_length_decode` |
| `DCTDecode` | `DCT` | `pdfcore.filters.dct.dct_decode` |
| `CCITTFaxDecode` | `CCF` | `pdfcore.filters.ccittfax.decoder.ccittfax_decode` |
| `JBIG2Decode` | | `pdfcore.filters.jbig2.jbig2_decode` |

An unknown name raises `pdfcore.errors.FilterError`.

Notes on individual decoders:

- `flate_decode` undoes PNG predictors (`Predictor` 10 and above) using
  `Columns`, `Colors` and `BitsPerComponent`. Corrupt compressed data is
  logged as a warning and the output decoded up to that point is returned.
- `lzw_decode` reads 9 to 12 bit codes and honours `EarlyChange` (0 or 1,
  default 1).
- `dct_decode` uses Pillow and returns interleaved gray, RGB or CMYK
  samples; JPEGs in any other mode are converted to RGB.
- `ccittfax_decode` handles Group 4 data (`K` < 0) and returns one byte
  per pixel, 255 for white and 0 for black. Its parameters are parsed by
  `FaxParams.from_dict`. The lower-level pieces live in
  `pdfcore.filters.ccittfax.bitreader` (`BitReader`),
  `pdfcore.filters.ccittfax.fax_table` (`decode_mode`,
  `decode_run_length`) and `pdfcore.filters.ccittfax.group4`
  (`Group4Decoder`, `decode_g4`).

## Color spaces

```python
from pdfcore.color.spaces import colorspace_name, parse_colorspace
from pdfcore.color.value import ColorValue

space = parse_colorspace("DeviceCMYK")
colorspace_name(space)                         # "DeviceCMYK"
space.rgb(ColorValue([0.0, 1.0, 0.0, 0.0]))    # ColorRgb(r=1.0, g=0.0, b=1.0)
```

`parse_colorspace(obj, resolve=None)` takes PDF names as `str`, arrays
as lists or tuples, dictionaries as mappings and byte strings as
`bytes`. The optional `resolve` callable turns any other object (such as
an indirect reference) into the object it refers to; without it, objects
are taken as already resolved.

Supported spaces: `DeviceGray`, `DeviceRgb`, `DeviceCmyk`
(`pdfcore.color.device`), `CalGray`, `CalRgb`
(`pdfcore.color.calibrated`), `Lab` (`pdfcore.color.lab`), and
`IccBased`, `Indexed` and `PatternColorSpace` (`pdfcore.color.spaces`).
Each offers `default_value()`, and all but `PatternColorSpace` offer
`number_of_components()` and `rgb(value)`. `IccBased` converts colors
through its alternate space; the ICC profile itself is not read.

## Encryption primitives

```python
from pdfcore.crypto import Rc4, rc4_decrypt

cipher_text = rc4_decrypt(b"secret", b"hello")
rc4_decrypt(b"secret", cipher_text)            # b"hello"
```

`pdfcore.crypto` also provides `aes128_decrypt` and `aes256_decrypt`
(data prefixed with a 16-byte IV, PKCS#7 padding removed, keys of 16 and
32 bytes) and `aes_cbc_encrypt` / `aes_cbc_decrypt` (AES-128 and AES-256
CBC on whole blocks without padding).

## Lexical helpers

`pdfcore.character` classifies bytes (`is_white_space`, `is_delimiter`,
`is_number`) and parses unsigned decimals from bytes
(`u16_from_buffer`, `u32_from_buffer`, `usize_from_buffer`), raising
`CharacterError` on a non-digit or a value out of range.

## Errors

All failures raise a subclass of `pdfcore.errors.PdfError`, such as
`FilterError`, `ColorError` or `CharacterError`, so callers can catch
one family or the whole hierarchy.

## What this package does not do

pdfcore is a set of components, not a PDF reader. It does not open PDF
files, parse objects or cross-reference tables, walk the page tree,
interpret content streams or render pages. The `Separation` and
`DeviceN` color spaces, PDF functions and shading patterns are not
supported; `parse_colorspace` raises `ColorError` for them. CCITT
Group 3 data and JBIG2 data cannot be decoded and raise `FilterError`.