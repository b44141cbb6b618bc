#!/usr/bin/env python3

import sys
import argparse
import json
import logging
import uuid

import logzero
from logzero import logger

from chaoscloud.actions import aliyun, aws
from chaoscloud.execute.execute import AliyunChannel, AwsChannel
from chaoscloud.guard import ActionExecutor

PROVIDERS = {
    'aliyun': (aliyun.KINDS, AliyunChannel),
    'aws': (aws.KINDS, AwsChannel),
}

LOG_LEVEL_HELP = """Logging level.
                      [LOG-LEVEL]: notset, debug, info, warning, error, critical
                      Default: info"""
levels = {
    'notset': logging.NOTSET,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL
}


def log_level(v):
    if v.lower() in levels.keys():
        return levels[v.lower()]
    else:
        raise argparse.ArgumentTypeError(
            'Expected one of the following: {}.'.format(
                 ', '.join(levels.keys())))


def program_args():
    parser = argparse.ArgumentParser(
        prog='chaoscloud',
        description='Inject faults into Aliyun and AWS resources. Repeating '
                    'a command reverts the fault it injected.')

    parser.add_argument('-l', '--log-level', type=log_level, nargs='?',
                        const=logging.INFO, default=logging.INFO,
                        help=LOG_LEVEL_HELP)

    parser.add_argument('--log-file', help='Also write logs to this file. '
                        'Default: None', default=None)

    parser.add_argument('--uid', help='The experiment ID used to correlate '
                        'log entries. Default: a random UUID', default=None)

    providers = parser.add_subparsers(dest='provider', metavar='provider')
    providers.required = True
    for provider, (kinds, _) in PROVIDERS.items():
        provider_parser = providers.add_parser(
            provider, help='{} experiment'.format(provider))
        actions = provider_parser.add_subparsers(dest='action',
                                                 metavar='action')
        actions.required = True
        for kind in kinds.values():
            action_parser = actions.add_parser(
                kind.name, help=kind.short_desc, description=kind.short_desc,
                epilog=kind.example,
                formatter_class=argparse.RawDescriptionHelpFormatter)
            for flag in kind.flags:
                action_parser.add_argument('--{}'.format(flag.name),
                                           dest=flag.name, default='',
                                           help=flag.desc)
    return parser


def parse_args(argv=None, parser=None):
    if parser is None:
        parser = program_args()
    return parser.parse_args(args=argv)


def init(args):
    logzero.loglevel(args.log_level)
    if args.log_file:
        logzero.logfile(args.log_file, loglevel=args.log_level)
    logger.debug("Initializing...")


def run(args):
    """
    Execute the action selected on the command line.

    :return: chaoscloud.common.Response
    """
    kinds, channel_class = PROVIDERS[args.provider]
    kind = kinds[args.action]
    flags = {flag.name: getattr(args, flag.name) for flag in kind.flags}
    uid = args.uid or str(uuid.uuid4())
    logger.debug("[%s] %s %s type=%s", uid, args.provider, args.action,
                 flags.get('type'))
    executor = ActionExecutor(kind, channel_class())
    return executor.exec(uid, flags)


def main(argv=None):
    args = parse_args(argv)
    init(args)
    response = run(args)
    print(json.dumps(response._asdict()))
    return 0 if response.success else 1


if __name__ == '__main__':
    sys.exit(main())
