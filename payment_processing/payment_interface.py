from abc import ABC, abstractmethod


class PaymentMethod(ABC):
    """
    PaymentMethod is the contract every payment rail implements
    The processor always calls 'authenticate' before 'process_transaction'

    Responsibilities:
    - Authenticate the payer with the rail's own mechanism
    - Carry out the transaction once authenticated
    """

    @abstractmethod
    def authenticate(self) -> str:
        """
        Authenticate with the payment rail

        Returns:
            str: The observable effect of authenticating
        """
        pass

    @abstractmethod
    def process_transaction(self) -> str:
        """
        Run the transaction on the payment rail

        Returns:
            str: The observable effect of the transaction
        """
        pass
