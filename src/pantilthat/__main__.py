#!/usr/bin/env python3

import argparse
import logging
import sys
from typing import List, Optional

from pantilthat import labels
from pantilthat.exceptions import PanTiltError
from pantilthat.logger import Logger
from pantilthat.pantilt import PanTilt

log = Logger().setup_logger()

AXES = {'pan': 1, 'tilt': 2}


def _int_auto_base(value: str) -> int:
    """Parse 21, 0x15 or 0o25 alike."""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid integer: {value!r}') from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='pantilthat', description=labels.CLI_DESCRIPTION)
    parser.add_argument('--config', help='JSON configuration file (default: $PANTILTHAT_CONFIG or ~/pantilthat.json)')
    parser.add_argument('--address', type=_int_auto_base, help='I2C address of the controller (default 0x15)')
    parser.add_argument('--port', type=int, help='I2C bus number (default 1)')
    parser.add_argument(
        '--keep-enabled', action='store_true', help='Leave the servos powered after pan or tilt instead of disabling them'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to the console')

    commands = parser.add_subparsers(dest='command', required=True)

    for axis in AXES:
        command = commands.add_parser(axis, help=f'Move the {axis} servo')
        command.add_argument('angle', type=int, help='Angle in degrees, -90 to 90')

    get_command = commands.add_parser('get', help='Read the current angle of an axis')
    get_command.add_argument('axis', choices=sorted(AXES))

    for name in ('enable', 'disable'):
        command = commands.add_parser(name, help=f'{name.capitalize()} a servo')
        command.add_argument('servo', type=int, choices=[1, 2])

    return parser


def run_command(pantilt: PanTilt, args: argparse.Namespace) -> None:
    if args.command in AXES:
        pantilt.write_angle(AXES[args.command], args.angle)
    elif args.command == 'get':
        angle = pantilt.read_angle(AXES[args.axis])
        print(labels.CLI_ANGLE.format(axis=args.axis, angle=angle))
    elif args.command == 'enable':
        pantilt.enable_servo(args.servo, True)
    elif args.command == 'disable':
        pantilt.disable_servo(args.servo)


def finish(pantilt: PanTilt, args: argparse.Namespace) -> None:
    """Disable the servos after a move unless asked to hold; other commands leave the device as it is."""
    if args.command in AXES and not args.keep_enabled:
        pantilt.shutdown()
    else:
        pantilt.close()


def main(argv: Optional[List[str]] = None, transport=None) -> int:
    args = build_parser().parse_args(argv)

    Logger().enable_console()
    if args.verbose:
        Logger().set_level(logging.DEBUG)

    try:
        pantilt = PanTilt.from_config(args.config, transport=transport, address=args.address, port=args.port)
    except PanTiltError as e:
        log.error(labels.CLI_ERROR.format(error=e))
        return 1

    try:
        run_command(pantilt, args)
    except PanTiltError as e:
        log.error(labels.CLI_ERROR.format(error=e))
        finish(pantilt, args)
        return 1

    finish(pantilt, args)
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        log.info(labels.CLI_TERMINATED_CTRL_C)
        sys.exit(130)


if __name__ == '__main__':
    run()
