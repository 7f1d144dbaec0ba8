""" The :class:`Service` is the principal entry point for callers: it pairs a
    transport with convenience methods for each supported operation, and
    runs every request through a :class:`ewskit.protocol.call.ServiceCall`.
"""

import concurrent.futures
import logging
import threading

from . import config
from .protocol.call import ServiceCall
from .protocol.enums import DeleteMode, ErrorHandling
from .protocol.operations import DeleteFolder, DeleteUserConfiguration, EmptyFolder
from .transport import zmq


logger = logging.getLogger(__name__)


class Service:
    """ Issue requests against a remote service through *transport*. The
        *error_handling* mode is the default for operations that accept one;
        it can be overridden per call.

        Calls are synchronous. :func:`submit` runs the same synchronous call
        on a worker thread and returns a :class:`concurrent.futures.Future`.
    """

    worker_count = 4

    def __init__(self, transport, error_handling=ErrorHandling.THROW_ON_ERROR):

        self.transport = transport
        self.error_handling = ErrorHandling(error_handling)

        self._executor = None
        self._executor_lock = threading.Lock()


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    @classmethod
    def from_config(cls, name):
        """ Build a :class:`Service` from the locally stored configuration
            *name*, connected with the ZeroMQ transport.
        """

        configuration = config.get(name)

        transport = zmq.client(configuration.address, configuration.port,
                               version=configuration.version,
                               timeout=configuration.timeout)

        logger.debug("service %s: %r", configuration.name, transport)
        return cls(transport, configuration.error_handling)


    @property
    def version(self):
        return self.transport.negotiated_version


    def call(self, operation):
        """ Return a new, unexecuted :class:`ServiceCall` for *operation*.
        """

        return ServiceCall(operation, self.transport)


    def execute(self, operation):
        """ Execute *operation* and return its
            :class:`ewskit.protocol.response.ServiceResponseCollection`.
        """

        return self.call(operation).execute()


    def submit(self, operation):
        """ Execute *operation* on a worker thread. The returned future
            resolves to the response collection, or to the exception the
            call raised.
        """

        with self._executor_lock:
            if self._executor is None:
                self._executor = concurrent.futures.ThreadPoolExecutor(self.worker_count, thread_name_prefix='ewskit')
            executor = self._executor

        return executor.submit(self.execute, operation)


    def close(self):
        """ Wait for any submitted calls to finish. The transport is
            borrowed, not owned, and is left open.
        """

        with self._executor_lock:
            executor = self._executor
            self._executor = None

        if executor is not None:
            executor.shutdown(wait=True)


    def _mode(self, error_handling):
        if error_handling is None:
            return self.error_handling
        return ErrorHandling(error_handling)


    def delete_user_configuration(self, name, parent_folder_id):
        """ Delete the user configuration *name* from the folder
            *parent_folder_id*. Any error is raised.
        """

        operation = DeleteUserConfiguration(name, parent_folder_id)
        return self.execute(operation)[0]


    def empty_folder(self, folder_ids, delete_mode=DeleteMode.HARD_DELETE, delete_sub_folders=False, error_handling=None):
        """ Empty each folder in *folder_ids*, returning one response per
            folder in the same order.
        """

        operation = EmptyFolder(folder_ids, delete_mode, delete_sub_folders, self._mode(error_handling))
        return self.execute(operation)


    def delete_folder(self, folder_ids, delete_mode=DeleteMode.SOFT_DELETE, error_handling=None):
        """ Delete each folder in *folder_ids*, returning one response per
            folder in the same order.
        """

        operation = DeleteFolder(folder_ids, delete_mode, self._mode(error_handling))
        return self.execute(operation)


# end of class Service


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
