"""
Contract Deployment Wrapper
Runs scripts/deploy_contract.py from the repository root
"""

import sys

from scripts.deploy_contract import main

if __name__ == "__main__":
    sys.exit(main())
