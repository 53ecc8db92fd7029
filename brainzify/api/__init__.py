"""
The low level layer of the API: operation definitions, request building, transport and response classification.
"""
from .endpoint import Endpoint, Operation, join_path_list
from .request import RequestEnvelope, RequestHandler, build_request
from .response import ResponseOutcome, Success, NoContent, APIFailure, TransportFailure, classify
