#!/usr/bin/env python3
"""
Empty one or more folders using a locally stored service configuration.

Each folder is reported on its own line, in the order given, so that a
failure for one folder does not hide the outcome for the others.
"""

import argparse
import logging
import sys

import ewskit


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('service', help='name of the stored service configuration')
    parser.add_argument('folders', nargs='+', help='folder ids or distinguished folder names')
    parser.add_argument('--subfolders', action='store_true', help='delete subfolders as well')
    parser.add_argument('--debug', action='store_true', help='enable debug logging')
    arguments = parser.parse_args()

    if arguments.debug:
        logging.basicConfig(level=logging.DEBUG)

    folder_ids = ewskit.FolderIdCollection()
    for folder in arguments.folders:
        try:
            folder = ewskit.DistinguishedFolder.parse(folder)
        except ValueError:
            pass
        folder_ids.add(folder)

    service = ewskit.Service.from_config(arguments.service)

    try:
        responses = service.empty_folder(folder_ids,
                                         delete_sub_folders=arguments.subfolders,
                                         error_handling=ewskit.ErrorHandling.RETURN_ERRORS)
    except ewskit.ServiceError as e:
        print('request failed: %s' % (e), file=sys.stderr)
        return 1

    for folder, response in zip(folder_ids, responses):
        if response.succeeded:
            print('%r: emptied' % (folder,))
        else:
            print('%r: %s %s' % (folder, response.error_code, response.error_message))

    if responses.overall_result == ewskit.ServiceResult.ERROR:
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
