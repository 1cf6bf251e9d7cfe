"""
dispatch_gateway – HTTP-triggered asynchronous message dispatch.

Import path convention::

    from dispatch_gateway.app import create_app
    from dispatch_gateway.application.dispatch import MessageDispatcher
    from dispatch_gateway.kernel.messaging import BrokerClient, MessageEnvelope
    from dispatch_gateway.adapters.kafka import KafkaBrokerClient
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
