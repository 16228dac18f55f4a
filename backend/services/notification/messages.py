ORDER_SUBJECT = "Custom Crate Order - {business_name}"

EMAIL_SENT = "Email sent successfully"
EMAIL_FAILED = "Failed to send email"

ORDER_TEXT = """\
Custom Crate Order Details

Customer Information:
- Your Name: {name}
- Business Name: {business_name}
- Address of Delivery: {delivery_address}

Crate Specifications:
- Dimensions: {dimensions}
- Quantity: {quantity} crate(s)
- Weight Rating: {weight} kg
- Total Weight: {total_weight} kg
- Date Required: {date_required}

This is an automated email. Please do not reply to this message.
If you have any questions, please contact our customer service team.
"""

# CSS braces are doubled for str.format
ORDER_HTML = """\
<!DOCTYPE html>
<html>
  <head>
    <style>
      body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
      .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
      .header {{ background-color: #f8f9fa; padding: 20px; border-radius: 5px; margin-bottom: 20px; }}
      .details {{ background-color: #ffffff; padding: 20px; border: 1px solid #dee2e6; border-radius: 5px; }}
      .section {{ margin-bottom: 20px; }}
      .section-title {{ font-weight: bold; color: #0066cc; margin-bottom: 10px; }}
      .footer {{ margin-top: 20px; padding-top: 20px; border-top: 1px solid #dee2e6; font-size: 0.9em; color: #666; }}
      table {{ width: 100%; border-collapse: collapse; }}
      td {{ padding: 8px; border-bottom: 1px solid #dee2e6; }}
      td:first-child {{ font-weight: bold; width: 40%; }}
    </style>
  </head>
  <body>
    <div class="container">
      <div class="header">
        <h2>Custom Crate Order Details</h2>
        <p>Thank you for using our Wooden Crate Visualizer.</p>
      </div>
      <div class="details">
        <div class="section">
          <div class="section-title">Customer Information</div>
          <table>
            <tr><td>Your Name:</td><td>{name}</td></tr>
            <tr><td>Business Name:</td><td>{business_name}</td></tr>
            <tr><td>Address of Delivery:</td><td>{delivery_address}</td></tr>
          </table>
        </div>
        <div class="section">
          <div class="section-title">Crate Specifications</div>
          <table>
            <tr><td>Dimensions:</td><td>{dimensions}</td></tr>
            <tr><td>Quantity:</td><td>{quantity} crate(s)</td></tr>
            <tr><td>Weight Rating:</td><td>{weight} kg</td></tr>
            <tr><td>Total Weight:</td><td>{total_weight} kg</td></tr>
            <tr><td>Date Required:</td><td>{date_required}</td></tr>
          </table>
        </div>
      </div>
      <div class="footer">
        <p>This is an automated email. Please do not reply to this message.</p>
        <p>If you have any questions, please contact our customer service team.</p>
      </div>
    </div>
  </body>
</html>
"""
