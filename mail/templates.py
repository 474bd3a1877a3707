"""Subjects and bodies for account notification e-mails."""

VERIFICATION_SUBJECT = "Verify your email"
VERIFICATION_TEXT = """Hello,

Thank you for signing up! Your verification code is:

    {code}

Enter this code on the verification page to complete your registration.
This code will expire in 24 hours for security reasons.

If you didn't create an account with us, please ignore this email.
"""
VERIFICATION_HTML = """<p>Hello,</p>
<p>Thank you for signing up! Your verification code is:</p>
<p style="font-size: 32px; font-weight: bold; letter-spacing: 5px;">{code}</p>
<p>Enter this code on the verification page to complete your registration.
This code will expire in 24 hours for security reasons.</p>
<p>If you didn't create an account with us, please ignore this email.</p>
"""

WELCOME_SUBJECT = "Welcome aboard"
WELCOME_TEXT = """Hello {name},

Your email has been verified and your account is ready to use.
"""
WELCOME_HTML = """<p>Hello {name},</p>
<p>Your email has been verified and your account is ready to use.</p>
"""

PASSWORD_RESET_SUBJECT = "Reset your password"
PASSWORD_RESET_TEXT = """Hello,

We received a request to reset your password. Open the link below to
choose a new one:

{reset_url}

This link will expire in 1 hour. If you didn't request a password reset,
please ignore this email.
"""
PASSWORD_RESET_HTML = """<p>Hello,</p>
<p>We received a request to reset your password. Click the link below to
choose a new one:</p>
<p><a href="{reset_url}">Reset Password</a></p>
<p>This link will expire in 1 hour. If you didn't request a password reset,
please ignore this email.</p>
"""

RESET_SUCCESS_SUBJECT = "Password reset successful"
RESET_SUCCESS_TEXT = """Hello,

Your password has been successfully reset. If you did not make this change,
contact support immediately.
"""
RESET_SUCCESS_HTML = """<p>Hello,</p>
<p>Your password has been successfully reset.</p>
<p>If you did not make this change, contact support immediately.</p>
"""
