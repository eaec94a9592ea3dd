"""PNG QR code rendering with the qrcode library"""

import base64
from io import BytesIO
import qrcode
from src.app.services.qr_code_renderer import QrCodeRenderer


class QrCodeImageRenderer(QrCodeRenderer):

    def to_data_url(self, content: str) -> str:
        img = qrcode.make(content)
        buf = BytesIO()
        img.save(buf, format="PNG")
        encoded = base64.b64encode(buf.getvalue()).decode("ascii")
        return f"data:image/png;base64,{encoded}"
