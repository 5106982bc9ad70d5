import argparse
import asyncio
import logging
import sys

from config import ConfigError, load_config
from controller import ERROR, MeetingController
from locales import SUPPORTED_LOCALES
from meeting_service import MeetingService

def build_controller(config, locale=None):
    """Wire the API client and controller from a loaded config."""
    service = MeetingService(config.api_url, timeout=config.timeout)
    return MeetingController(service, locale=locale or config.locale, tz=config.tz)

def print_notices(controller):
    notices = controller.drain_notices()
    for notice in notices:
        stream = sys.stderr if notice.level == ERROR else sys.stdout
        print(notice.message, file=stream)
    return notices

def print_meetings(controller):
    messages = controller.messages
    if not controller.meetings:
        print(messages['no_meetings'])
    for m in controller.meetings:
        print(f"{m.id}: {m.topic} ({messages['label_date']}: {m.date}, {m.start_time}-{m.end_time}, "
              f"{messages['label_participants']}: {m.participants_text()})")

def fill_draft(controller, args):
    """Copy the CLI field options that were given into the draft."""
    for name, value in (('topic', args.topic), ('date', args.date), ('start_time', args.start),
                        ('end_time', args.end), ('participants', args.participants)):
        if value is not None:
            controller.update_field(name, value)

def main(argv=None):
    """Main entry point for the meeting organizer CLI."""
    parser = argparse.ArgumentParser(description='Meeting organizer CLI')
    parser.add_argument('--config', type=str, default=None, help='YAML config file path (default: config.yaml)')
    parser.add_argument('--api-url', type=str, default=None, help='Meetings API base URL (overrides config)')
    parser.add_argument('--locale', type=str, choices=SUPPORTED_LOCALES, default=None, help='Language for messages')
    subparsers = parser.add_subparsers(dest='command')

    # ===== Meeting Commands =====
    subparsers.add_parser('list', help='List all meetings')
    parser_create = subparsers.add_parser('create', help='Create a meeting')
    parser_create.add_argument('topic', type=str, help='Meeting topic')
    parser_create.add_argument('date', type=str, help='Date (YYYY-MM-DD)')
    parser_create.add_argument('start', type=str, help='Start time (HH:MM)')
    parser_create.add_argument('end', type=str, help='End time (HH:MM)')
    parser_create.add_argument('--participants', type=str, default=None, help='Comma-separated participant names')
    parser_update = subparsers.add_parser('update', help='Update a meeting')
    parser_update.add_argument('meeting_id', type=int, help='Meeting ID')
    parser_update.add_argument('--topic', type=str, default=None, help='New topic')
    parser_update.add_argument('--date', type=str, default=None, help='New date (YYYY-MM-DD)')
    parser_update.add_argument('--start', type=str, default=None, help='New start time (HH:MM)')
    parser_update.add_argument('--end', type=str, default=None, help='New end time (HH:MM)')
    parser_update.add_argument('--participants', type=str, default=None, help='Comma-separated participant names')
    parser_delete = subparsers.add_parser('delete', help='Delete a meeting')
    parser_delete.add_argument('meeting_id', type=int, help='Meeting ID')

    # ===== Configuration Commands =====
    subparsers.add_parser('show-config', help='Show the effective configuration')

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    if args.api_url:
        config.api_url = args.api_url.rstrip('/')

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    controller = build_controller(config, args.locale)
    ok = True

    if args.command == 'list':
        ok = asyncio.run(controller.load())
        if ok:
            print_meetings(controller)
    elif args.command == 'create':
        fill_draft(controller, args)
        ok = asyncio.run(controller.submit())
    elif args.command == 'update':
        ok = asyncio.run(controller.load())
        if ok:
            meeting = controller.find(args.meeting_id)
            if meeting is None:
                print(f"{controller.messages['error_not_found']}: {args.meeting_id}", file=sys.stderr)
                ok = False
            else:
                controller.begin_edit(meeting)
                fill_draft(controller, args)
                ok = asyncio.run(controller.submit())
    elif args.command == 'delete':
        ok = asyncio.run(controller.delete(args.meeting_id))
    elif args.command == 'show-config':
        print(f"API URL: {config.api_url}")
        print(f"Locale: {args.locale or config.locale}")
        print(f"Timezone: {config.timezone or 'local'}")
        print(f"Timeout: {config.timeout}s")
    else:
        parser.print_help()
        return 0

    notices = print_notices(controller)
    # A failed save only sets the error line
    if not ok and controller.error and not any(n.level == ERROR for n in notices):
        print(controller.error, file=sys.stderr)
    return 0 if ok else 1

if __name__ == '__main__':
    sys.exit(main())
