from .request import Client, Server, client, shutdown

ZmqTransport = Client
