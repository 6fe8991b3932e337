"""Persistence bridge between the editor session and the asset backend.

Save writes the transform columns of one asset row. Publish flips the
visibility flag and produces the shareable AR link plus its QR code.
"""

import io
import logging
from dataclasses import dataclass

import qrcode

from constants import DEFAULT_PUBLIC_ORIGIN
from services.supabase_client import BackendError
from utils.transform_math import transform_to_payload

logger = logging.getLogger('Persistence')


class PersistenceError(Exception):
    """Save or publish failed; the caller keeps its local state"""


@dataclass(frozen=True)
class PublishResult:
    asset_id: str
    url: str
    qr_png: bytes


def ar_scene_url(origin, asset_id):
    """Shareable viewer link: <origin>/ar/<asset_id>"""
    return f"{origin.rstrip('/')}/ar/{asset_id}"


def make_qr_png(data):
    """Encode data as a QR code PNG image"""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    img_io = io.BytesIO()
    img.save(img_io, 'PNG')
    return img_io.getvalue()


class PersistenceBridge:
    """Adapts editor operations onto a backend client.

    Args:
        client: Object providing update_asset(asset_id, fields)
        public_origin: Base URL of the public AR viewer
    """

    def __init__(self, client, public_origin=DEFAULT_PUBLIC_ORIGIN):
        self.client = client
        self.public_origin = public_origin

    def save(self, asset_id, transform):
        """Write position/rotation/scale for asset_id.

        Raises:
            PersistenceError: if the backend rejects or cannot be reached
        """
        payload = transform_to_payload(transform)
        try:
            self.client.update_asset(asset_id, payload)
        except BackendError as e:
            raise PersistenceError(str(e)) from e
        logger.info("Saved transform for asset %s", asset_id)
        return payload

    def publish(self, asset_id):
        """Mark asset_id as published and build its share link and QR code.

        Raises:
            PersistenceError: if the visibility flag could not be written
        """
        try:
            self.client.update_asset(asset_id, {'published': True})
        except BackendError as e:
            raise PersistenceError(str(e)) from e
        url = ar_scene_url(self.public_origin, asset_id)
        logger.info("Published asset %s at %s", asset_id, url)
        return PublishResult(asset_id=asset_id, url=url, qr_png=make_qr_png(url))
