#
# Prettydump - Sentinels Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from prettydump.sentinels import UNSET, UnsetType


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnset:
    def test_singleton_identity(self):
        """Ensure the sentinel is a singleton object."""
        assert UNSET is UnsetType()

    def test_repr_clean(self):
        """Assert repr shows clean angle-bracketed name."""
        assert repr(UNSET) == "<UNSET>"

    def test_falsy(self):
        """Sentinel is falsy but distinct from None."""
        assert not UNSET
        assert UNSET is not None

    def test_equality_with_non_sentinel(self):
        """Sentinel never equals ordinary values."""
        assert UNSET != None  # noqa: E711
        assert UNSET != 0
        assert UNSET != ""

    @pytest.mark.parametrize(
        "protocol",
        [pytest.param(p, id=f"protocol-{p}") for p in range(pickle.HIGHEST_PROTOCOL + 1)],
    )
    def test_pickle_roundtrip(self, protocol):
        """Pickling returns the singleton instance."""
        assert pickle.loads(pickle.dumps(UNSET, protocol=protocol)) is UNSET

    def test_no_instance_dict(self):
        """Slotted sentinel rejects attribute assignment."""
        with pytest.raises(AttributeError):
            UNSET.foo = 1  # type: ignore[attr-defined]
