"""Error types raised while turning an API document into HAR requests."""


class HarError(Exception):
    """Base class for every conversion failure."""

    code = "har_error"


class ReferenceUnresolvable(HarError):
    """A local `$ref` points nowhere, is external, or loops."""

    code = "reference_unresolvable"

    def __init__(self, ref: str, reason: str):
        super().__init__(f"{reason}: {ref}")
        self.ref = ref
        self.reason = reason


class SamplingFailed(HarError):
    """The schema sampler could not produce a value."""

    code = "sampling_failed"


class DocumentMalformed(HarError):
    """The document lacks structure the converter depends on."""

    code = "document_malformed"
