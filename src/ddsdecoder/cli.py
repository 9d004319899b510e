"""Command-line interface for ddsdecoder"""
import sys
import argparse
import logging
import os
import time
import imageio.v3 as iio

from .dds import DDS
from .errors import DDSError, NotRecognized, UnsupportedFormat
from .log import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    """Command-line interface for ddsdecoder"""
    parser = argparse.ArgumentParser(
        prog='ddsdecoder',
        description='Read DDS (DirectDraw Surface) texture files and extract their mipmap levels',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ddsdecoder texture.dds                        # Display DDS file info and mipmap levels
  ddsdecoder texture.dds -o output.png          # Convert level 0 to PNG (uncompressed formats)
  ddsdecoder texture.dds -o output.png -m 1     # Convert mipmap level 1
  ddsdecoder texture.dds -o output.png --all    # Convert every mipmap level
  ddsdecoder texture.dds -o output --raw --all  # Dump the stored bytes of every level
        """
    )

    parser.add_argument('input', help='Input DDS file path')
    parser.add_argument('-o', '--output', help='Output file path (e.g., output.png)')
    parser.add_argument('-m', '--mipmap', type=int, default=0,
                        help='Mipmap level to extract (default: 0 = full resolution)')
    parser.add_argument('--all', action='store_true',
                        help='Extract all mipmap levels')
    parser.add_argument('--raw', action='store_true',
                        help='Write the stored level bytes (<output>_mip<N>.bin) instead of an image')
    parser.add_argument('--log-level', default='WARNING',
                        help='Logging level (default: WARNING)')
    parser.add_argument('--log-file', help='Also write log records to this file')

    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        start = time.perf_counter()
        dds = DDS.from_file(args.input)
        logger.info("Parsed %s in %.2f ms", args.input, (time.perf_counter() - start) * 1000)
    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found")
        sys.exit(1)
    except OSError as e:
        print(f"Error reading '{args.input}': {e}")
        sys.exit(1)
    except NotRecognized as e:
        print(f"Error: '{args.input}' is not a DDS file ({e})")
        sys.exit(2)
    except DDSError as e:
        print(f"Error parsing DDS file: {e}")
        sys.exit(1)

    print(dds)
    print()
    for image in dds.images:
        print(f"  Level {image.level}: {image.width}x{image.height}, {image.size} bytes")

    if not args.output:
        return

    if args.all:
        levels = list(range(len(dds.images)))
    else:
        levels = [args.mipmap]

    output_base, output_ext = os.path.splitext(args.output)
    for level in levels:
        try:
            image = dds.get_image(level)
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)

        if args.raw:
            output_file = f"{output_base}_mip{level}.bin"
            try:
                with open(output_file, 'wb') as f:
                    f.write(image.contents)
            except OSError as e:
                print(f"Error writing {output_file}: {e}")
                continue
            print(f"Saved to: {output_file} ({image.size} bytes, {image.compression.name})")
            continue

        output_file = f"{output_base}_mip{level}{output_ext}" if len(levels) > 1 else args.output
        try:
            pixels = image.to_array()
        except UnsupportedFormat as e:
            print(f"Cannot convert to image: {e}")
            continue

        # imageio expects RGB(A) channel order
        if image.pixel_format.channels == 'BGRA':
            pixels = pixels[:, :, [2, 1, 0, 3]]

        start_save = time.perf_counter()
        try:
            iio.imwrite(output_file, pixels)
        except Exception as e:
            print(f"Error converting to image: {e}")
            continue
        save_time = time.perf_counter() - start_save

        print(f"Saved to: {output_file}")
        print(f"Image size: {pixels.shape[1]}x{pixels.shape[0]}")
        print(f"Save time: {save_time*1000:.2f} ms")


if __name__ == "__main__":
    main()
