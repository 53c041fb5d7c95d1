"""Headless front end: render a frame, replay zoom clicks, write images."""

from __future__ import annotations

import sys
from argparse import ArgumentParser
from dataclasses import replace
from pathlib import Path

from fractus import ConfigError, Explorer, IterateMap, color_strategy, iterate_map
from fractus.config import COLOR_STRATEGIES, DEFAULT_CONFIG
from fractus.output import FrameWriters, write_single_image
from fractus.request import config_from_request, load_request

VERBOSE = False


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


def build_parser():
    parser = ArgumentParser(prog="fractus", description="Render escape-time fractals to image files.")

    parser.add_argument('--bl', type=float, nargs=2, metavar=('RE', 'IM'),
                        help='bottom-left corner of the viewport in the complex plane (default: -3 -1)')

    parser.add_argument('--dim', type=float, nargs=2, metavar=('WIDTH', 'HEIGHT'),
                        help='width and height of the viewport in the complex plane (default: 4 2)')

    parser.add_argument('--res', type=int, nargs=2, metavar=('WIDTH_PX', 'HEIGHT_PX'),
                        help='resolution of the rendered image in pixels (default: 1400 700)')

    parser.add_argument('--iters', type=int, metavar='ITERS',
                        help='maximum number of iterations per pixel (default: 1000)')

    parser.add_argument('--iterate', type=str, default=IterateMap.QUADRATIC.value,
                        choices=[m.value for m in IterateMap],
                        help='iteration map applied to every point')

    parser.add_argument('--color', type=str, default='pcl', choices=COLOR_STRATEGIES,
                        help='coloring strategy: flat black/white, phased color loop, or a matplotlib colormap')

    parser.add_argument('--colormap', type=str, default='twilight_shifted',
                        help='matplotlib colormap used by --color colormap (e.g. "viridis", "inferno")')

    parser.add_argument('--cycle', type=float, default=64.0,
                        help='smoothed iterations per pass through the colormap')

    parser.add_argument('--request', type=str, metavar='FILE',
                        help='JSON request body with optional "bl", "dim", "res" and "iters" fields; '
                             'explicit flags take precedence')

    parser.add_argument('--click', type=float, nargs=2, action='append', metavar=('X', 'Y'), default=[],
                        help='pixel to zoom into (top-left origin), halving the viewport. May be repeated.')

    parser.add_argument('--output', type=str, default='fractal.png',
                        help='path of the final image')

    parser.add_argument('--format', type=str, dest='format', default='png',
                        help='file format for image outputs. Can be any extension supported by Pillow.')

    parser.add_argument('--gif', type=str, metavar='PATH',
                        help='also write every frame of the click sequence to an animated GIF')

    parser.add_argument('--frame-dir', type=str, dest='frame_dir',
                        help='directory in which to store every frame of the click sequence')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print the viewport of every frame and the clicked plane points')

    return parser


def resolve_output_path(opt, parser: ArgumentParser) -> Path:
    image_format = (opt.format or "png").lower().lstrip(".") or "png"
    opt.format = image_format
    output_path = Path(opt.output).expanduser()
    if output_path.exists() and output_path.is_dir():
        parser.error("--output must point to a file, not a directory.")
    expected_suffix = f".{image_format}"
    if output_path.suffix:
        if output_path.suffix.lower() != expected_suffix:
            parser.error(f"--output extension {output_path.suffix} does not match --format {image_format}.")
    else:
        output_path = output_path.with_suffix(expected_suffix)
    return output_path.resolve()


def resolve_config(opt, parser: ArgumentParser):
    payload = {}
    try:
        if opt.request:
            payload.update(load_request(opt.request))
    except OSError as exc:
        parser.error(f"could not read --request file: {exc}")
    except ConfigError as exc:
        parser.error(str(exc))

    if opt.bl is not None:
        payload["bl"] = list(opt.bl)
    if opt.dim is not None:
        payload["dim"] = list(opt.dim)
    if opt.res is not None:
        payload["res"] = list(opt.res)
    if opt.iters is not None:
        payload["iters"] = opt.iters

    try:
        config = config_from_request(payload, DEFAULT_CONFIG)
        return replace(
            config,
            iterate=iterate_map(opt.iterate),
            color_of=color_strategy(opt.color, colormap=opt.colormap, cycle=opt.cycle),
        )
    except ConfigError as exc:
        parser.error(str(exc))


def describe(config) -> str:
    viewport = config.viewport
    return "origin=({0}, {1}) size={2}x{3} iters={4}".format(
        viewport.origin.re, viewport.origin.im, viewport.width, viewport.height, config.max_iterations)


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    output_path = resolve_output_path(opt, parser)
    config = resolve_config(opt, parser)

    gif_path = Path(opt.gif).expanduser().resolve() if opt.gif else None
    if gif_path is not None and gif_path.suffix.lower() != ".gif":
        parser.error("GIF outputs must end with .gif.")
    frame_dir = Path(opt.frame_dir).expanduser().resolve() if opt.frame_dir else None

    clicks = [tuple(click) for click in opt.click]
    total_frames = len(clicks) + 1
    frame_digits = max(3, len(str(total_frames - 1)))

    explorer = Explorer(config)
    with FrameWriters(gif_path, frame_dir, frame_digits, opt.format) as writers:
        for i in range(total_frames):
            print("frame {0} out of {1}".format(i, total_frames), end='\r')
            if i == 0:
                explorer.render()
            else:
                point = explorer.click(clicks[i - 1])
                log("\nclicked pixel ({0}, {1}) -> {2} + {3}i".format(*clicks[i - 1], point.re, point.im))
            log("\n" + describe(explorer.config))
            writers.write(i, explorer.buffer)

    write_single_image(explorer.buffer, output_path, opt.format)
    print()
    log("wrote %s" % output_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
