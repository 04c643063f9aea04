from app.platform.config import settings
from app.platform.services.email import env, send_email


def send_otp_email(to_email: str, otp: str) -> bool:
    """Used for: Contact Form Email Verification"""
    template = env.get_template("otp_verification.html")
    html_content = template.render(
        otp_code=otp,
        expiration_minutes=settings.OTP_EXPIRE_MINUTES,
        company_name=settings.COMPANY_NAME,
        company_address=settings.COMPANY_ADDRESS,
        company_phone=settings.COMPANY_PHONE,
    )
    return send_email(
        to_email,
        f"OTP Verification - {settings.COMPANY_NAME} Contact Form",
        html_content,
        from_address=settings.MAIL_FROM_ADDRESS,
    )
