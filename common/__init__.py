from common.utils import clamp, minmax, isFiniteNumber, getClassVariables, enumFromName
from common.lrucache import LRUCache
from common.validation import validateMandatoryFloat, validatePositiveFloat, \
    validateMandatoryStr, validateMandatoryEnum, validateMandatoryCollection
