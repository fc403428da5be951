# bmptool

A small editor for uncompressed BMP images. It reads and writes 8-bit
(palette/grayscale) and 24-bit (true colour) bitmaps. It applies simple
point operations and 3×3 convolution filters. It has no dependencies
outside the standard library.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## The interactive editor

    bmptool

This starts a menu-driven session on standard input and output. The menu
text is in French. Input is read as whitespace-separated tokens, so a file
path cannot contain spaces. The session ends when you choose *Quitter* or
when input runs out.

1. **Ouvrir une image**: open an image. The file is tried as an 8-bit image
   first. If that fails, it is tried as a 24-bit image. If both fail, the
   editor prints `Fichier invalide`.
2. **Sauvegarder l'image**: save the image. An 8-bit image goes to
   `output_8bit.bmp` and a 24-bit image to `output_24bit.bmp`. Both are
   written in the current directory.
3. **Appliquer un filtre**: apply a filter.
   - negative
   - brightness, which asks for an offset
   - threshold, which asks for a level; 8-bit images only
   - box blur, Gaussian blur, outline, emboss and sharpen; 24-bit images only
4. **Afficher les informations**: show the width, height and colour depth of
   the loaded image.
5. **Quitter**: quit.

`bmptool --help` prints a short usage line. The command takes no other options.

The session can also be driven from code. `bmptool.cli.run(input_stream,
output_stream)` reads menu choices from any text stream. `bmptool.cli.Session`
holds the current image and has three methods:

- `open(path)` raises `BmpError` if the file is not usable at either depth.
- `save()` returns the path it wrote to. It writes inside `Session.output_dir`.
- `describe()` returns the summary text.

`save()` and `describe()` raise `ValueError` when no image is loaded.

## Using it as a library

```python
from bmptool.bmp24 import Bmp24Image
from bmptool.bmp8 import Bmp8Image
from bmptool.kernels import gaussian_blur_kernel

photo = Bmp24Image.load("photo.bmp")
photo.grayscale()
photo.apply_filter(gaussian_blur_kernel())
photo.save("photo_soft.bmp")

scan = Bmp8Image.load("scan.bmp")
print(scan.info())
scan.threshold(128)
scan.save("scan_bw.bmp")
```

### 24-bit images (`bmptool.bmp24`)

- `Bmp24Image.load(path)` reads the image. `Bmp24Image.blank(width, height)`
  builds a black image with consistent headers.
- `data[y][x]` holds an immutable `Pixel(red, green, blue)`. Row 0 is the top
  of the image.
- The file headers are kept as `header` (`BmpFileHeader`) and `info`
  (`BmpInfoHeader`). `save` writes them back unchanged, then writes the pixel
  rows from the header's data offset.
- The point operations are `negative()`, `grayscale()` (the integer mean of
  the three channels) and `brightness(value)`.
- `convolution(x, y, kernel)` returns the filtered `Pixel` at one position.
  Neighbours outside the image are skipped, and results are rounded half away
  from zero. `apply_filter(kernel)` filters every pixel this way.
- `clamp(value)` bounds an integer to 0..255.

### 8-bit images (`bmptool.bmp8`)

- `Bmp8Image` keeps the raw 54-byte header, the 1024-byte colour table and
  one byte per pixel.
- `save` updates the file-size and data-size fields of the header.
- `info()` returns a text summary.
- The point operations are `negative()`, `brightness(value)` and
  `threshold(level)`. `threshold` sets pixels at or above the level to 255
  and all others to 0.
- `apply_filter(kernel)` convolves interior pixels only. It leaves a border
  as wide as half the kernel untouched, and truncates results toward zero
  after clamping. The interactive menu does not offer this filter. It is
  available from code only.

### Kernels (`bmptool.kernels`)

Each of these returns a 3×3 tuple of floats:

- `box_blur_kernel()`
- `gaussian_blur_kernel()`
- `outline_kernel()`
- `emboss_kernel()`
- `sharpen_kernel()`

Both `apply_filter` methods accept any square kernel of odd size. They raise
`ValueError` for any other shape.

### Errors (`bmptool.errors`)

A file of the wrong colour depth raises `UnsupportedDepthError`, which is a
subclass of `BmpError`. A header that is too short also raises `BmpError`.

## What it does not do

- It handles uncompressed bitmaps only. The compression field is not checked.
- 24-bit images stored top-down, with a negative height, are rejected.
- The 8-bit reader assumes the pixel data follows a 1024-byte colour table
  directly after the 54-byte header.
- Images are not converted between 8-bit and 24-bit.
- The editor always saves to the two fixed file names above. It cannot be
  told to save under another name.