from __future__ import annotations


# Engine validation failures
class EngineError(ValueError): pass


class InvalidSizeError(EngineError): pass


class IndexOutOfBoundsError(EngineError): pass


class OccupiedCellError(EngineError): pass


class InvalidProbabilityError(EngineError): pass


class InvalidPlayerError(EngineError): pass


# Controller actions attempted in the wrong phase
class IllegalActionError(Exception): pass
