# Minimal ABIs for the calls the lifecycle makes. Report getters are
# generated from their metric categories (see reports/base.py).

GOVERNANCE_PROTOCOL_ABI = [
    {"anonymous": False, "inputs": [{"indexed": True, "internalType": "uint256", "name": "id", "type": "uint256"}, {"indexed": True, "internalType": "address", "name": "proposer", "type": "address"}, {"indexed": False, "internalType": "address", "name": "target", "type": "address"}, {"indexed": False, "internalType": "uint256", "name": "value", "type": "uint256"}, {"indexed": False, "internalType": "bytes", "name": "data", "type": "bytes"}, {"indexed": False, "internalType": "uint256", "name": "voteDelay", "type": "uint256"}], "name": "Proposed", "type": "event"},
    {"inputs": [{"name": "target", "type": "address"}, {"name": "value", "type": "uint256"}, {"name": "data", "type": "bytes"}, {"name": "voteDelay", "type": "uint256"}], "name": "propose", "outputs": [{"name": "", "type": "uint256"}], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [{"name": "id", "type": "uint256"}, {"name": "support", "type": "bool"}, {"name": "power", "type": "uint256"}], "name": "vote", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [{"name": "id", "type": "uint256"}], "name": "queue", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [{"name": "id", "type": "uint256"}], "name": "execute", "outputs": [], "stateMutability": "payable", "type": "function"},
    {"inputs": [], "name": "timelockDelay", "outputs": [{"name": "", "type": "uint256"}], "stateMutability": "view", "type": "function"},
]
