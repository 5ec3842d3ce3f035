"""
utils/email_utils.py

Purpose: Verification email rendering

- Builds the HTML body that carries the OTP
- The code is shown large and spaced out, followed by the expiry notice
- All interpolated values are HTML-escaped
"""

from html import escape


def create_otp_email_html(otp: str, brand_name: str = "FixmyCity", expiry_minutes: int = 5, year: int = 2024) -> str:
    """
    Renders the verification email.

    Args:
        otp: One-time code to display
        brand_name: Product name for header and footer
        expiry_minutes: Validity shown to the reader
        year: Copyright year in the footer

    Returns:
        HTML document as a string
    """
    otp = escape(otp)
    brand_name = escape(brand_name)

    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <div style="background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); padding: 30px; border-radius: 10px; text-align: center; margin-bottom: 20px;">
    <h1 style="color: white; margin: 0; font-size: 28px;">{brand_name}</h1>
    <p style="color: white; margin: 10px 0 0 0; opacity: 0.9;">Email Verification</p>
  </div>

  <div style="background: #f8f9fa; padding: 30px; border-radius: 10px; text-align: center;">
    <h2 style="color: #333; margin-bottom: 20px;">Your Verification Code</h2>
    <div style="background: white; padding: 20px; border-radius: 8px; border: 2px dashed #667eea; margin: 20px 0;">
      <span style="font-size: 32px; font-weight: bold; color: #667eea; letter-spacing: 8px;">{otp}</span>
    </div>
    <p style="color: #666; margin: 20px 0;">Enter this code in the app to verify your email address.</p>
    <p style="color: #999; font-size: 14px;">This code will expire in {expiry_minutes} minutes.</p>
  </div>

  <div style="text-align: center; margin-top: 20px; padding: 20px; color: #999; font-size: 12px;">
    <p>If you didn't request this code, please ignore this email.</p>
    <p>&copy; {year} {brand_name}. All rights reserved.</p>
  </div>
</div>
"""
