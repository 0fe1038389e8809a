"""
Deployment Exceptions
Errors raised by the contract deployment layer
"""


class DeploymentError(Exception):
    """Base class for all deployment errors"""


class ConnectionFailedError(DeploymentError):
    """RPC endpoint could not be reached"""


class SignerUnavailableError(DeploymentError):
    """No account available to sign the deployment"""


class CompilationError(DeploymentError):
    """Compile command exited with a non-zero status"""


class ArtifactNotFoundError(DeploymentError):
    """No compiled artifact matches the contract name"""


class AmbiguousArtifactError(DeploymentError):
    """Several artifacts match a bare contract name"""


class InvalidArtifactError(DeploymentError):
    """Artifact is malformed or has no deployable bytecode"""


class DeploymentFailedError(DeploymentError):
    """Deployment transaction was mined but reverted"""


class DeploymentNotConfirmedError(DeploymentError):
    """Address requested before the deployment was confirmed"""
