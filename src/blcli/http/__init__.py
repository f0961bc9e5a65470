from blcli.http.transport import BinaryLaneTransport

__all__ = ["BinaryLaneTransport"]
