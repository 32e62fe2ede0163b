from web3 import Web3


def to_display_address(address, checksum: bool = False):
    """Return the address as it should appear in a report.

    With checksum set, 20-byte hex addresses are rendered in EIP-55 form.
    Anything else is returned unchanged.
    """
    if not checksum or not isinstance(address, str):
        return address
    if not Web3.is_address(address):
        return address
    return Web3.to_checksum_address(address)
