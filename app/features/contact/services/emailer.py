from app.features.contact.schemas.contact import ContactRequest, EnquiryRequest
from app.platform.config import settings
from app.platform.services.email import env, send_email


def send_contact_email(form: ContactRequest) -> bool:
    """Used for: Verified Contact Form -> Sales Inbox"""
    template = env.get_template("contact_notification.html")
    html_content = template.render(
        name=form.name,
        email=form.email,
        subject=form.subject,
        message=form.message,
        company_name=settings.COMPANY_NAME,
    )
    return send_email(
        settings.MAIL_SALES_ADDRESS,
        f"Contact Form: {form.subject} - {settings.COMPANY_NAME}",
        html_content,
        from_address=settings.MAIL_NOREPLY_ADDRESS,
    )


def send_enquiry_email(enquiry: EnquiryRequest) -> bool:
    """Used for: Popup Product Enquiry -> Sales Inbox"""
    template = env.get_template("enquiry_notification.html")
    html_content = template.render(
        name=enquiry.name,
        email=enquiry.email,
        phone=enquiry.phone,
        product=enquiry.product,
        message=enquiry.message,
        company_name=settings.COMPANY_NAME,
    )
    return send_email(
        settings.MAIL_SALES_ADDRESS,
        f"New Enquiry - {settings.COMPANY_NAME}",
        html_content,
        from_address=settings.MAIL_NOREPLY_ADDRESS,
    )
