"""
Pickup verification codes kept in the Django cache.
"""
import secrets
import time
from datetime import timedelta

from django.conf import settings
from django.core.cache import cache
from django.db import transaction
from django.utils import timezone

KEY_PREFIX = 'verification_code:'


class VerificationCodeService:
    """Six-digit codes keyed by order number, expiring after VERIFICATION_CODE_TTL seconds"""

    @staticmethod
    def _key(order_no):
        return f"{KEY_PREFIX}{order_no}"

    @staticmethod
    def generate_code():
        return '%06d' % secrets.randbelow(1000000)

    @staticmethod
    def store(order_no, code=None):
        """Store ``code`` (or a fresh one) for the order and return it"""
        code = code or VerificationCodeService.generate_code()
        ttl = settings.VERIFICATION_CODE_TTL
        cache.set(
            VerificationCodeService._key(order_no),
            {'code': code, 'expires_at': time.time() + ttl},
            ttl,
        )
        return code

    @staticmethod
    def get(order_no):
        entry = cache.get(VerificationCodeService._key(order_no))
        return entry['code'] if entry else None

    @staticmethod
    def verify(order_no, code):
        stored = VerificationCodeService.get(order_no)
        if not stored or not code:
            return False
        return secrets.compare_digest(stored, str(code))

    @staticmethod
    def exists(order_no):
        return VerificationCodeService.get(order_no) is not None

    @staticmethod
    def get_ttl(order_no):
        """Seconds until the code expires, 0 when there is no code"""
        entry = cache.get(VerificationCodeService._key(order_no))
        if not entry:
            return 0
        return max(0, int(entry['expires_at'] - time.time()))

    @staticmethod
    def delete(order_no):
        cache.delete(VerificationCodeService._key(order_no))

    @staticmethod
    def regenerate(order_no, code=None):
        VerificationCodeService.delete(order_no)
        return VerificationCodeService.store(order_no, code)

    @staticmethod
    def issue(order, regenerate=False):
        """
        Create a code for the order and record its expiry on the row.

        A new order's code is cached once the surrounding transaction
        commits, so a rolled back exchange leaves nothing behind. A
        regenerated code replaces the old one straight away.
        """
        if regenerate:
            code = VerificationCodeService.regenerate(order.order_no)
        else:
            code = VerificationCodeService.generate_code()
            order_no = order.order_no
            transaction.on_commit(lambda: VerificationCodeService.store(order_no, code))
        order.verification_code_expires_at = timezone.now() + timedelta(seconds=settings.VERIFICATION_CODE_TTL)
        order.save(update_fields=['verification_code_expires_at', 'updated_at'])
        return code
