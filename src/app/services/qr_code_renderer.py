"""QR Code Renderer Interface"""

from abc import ABC, abstractmethod


class QrCodeRenderer(ABC):

    @abstractmethod
    def to_data_url(self, content: str) -> str:
        """Render content as a PNG QR code data URL"""
        pass
