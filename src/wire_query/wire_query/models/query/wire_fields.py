# ABOUTME: Snapshot of the OP_QUERY header values produced by a query spec
# ABOUTME: Enforces the signed 32-bit range at the encoding boundary

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wire_query.exceptions import WireEncodingError
from wire_query.models.query.query_option import QueryOption

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class QueryWireFields(BaseModel):
    """
    [L0] The integer fields a transport places into an OP_QUERY message.

    Attributes:
        flags: The option bit-field.
        number_to_skip: Documents the server skips before returning results.
        number_to_return: The derived numberToReturn value.
    """

    model_config = ConfigDict(frozen=True)

    flags: int = Field(ge=0, le=INT32_MAX)
    number_to_skip: int = Field(ge=INT32_MIN, le=INT32_MAX)
    number_to_return: int = Field(ge=INT32_MIN, le=INT32_MAX)

    @classmethod
    def build(cls, flags: QueryOption, number_to_skip: int, number_to_return: int) -> "QueryWireFields":
        """
        Creates the snapshot, translating range violations into `WireEncodingError`.

        Raises:
            WireEncodingError: If any value does not fit its wire field.
        """
        try:
            return cls(flags=int(flags), number_to_skip=number_to_skip, number_to_return=number_to_return)
        except ValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise WireEncodingError(
                f"Query values do not fit the wire message: {', '.join(fields)}",
                code="INT32_OUT_OF_RANGE",
                details={
                    "fields": fields,
                    "number_to_skip": number_to_skip,
                    "number_to_return": number_to_return,
                },
            ) from e

    @property
    def options(self) -> QueryOption:
        return QueryOption.from_bits(self.flags)
