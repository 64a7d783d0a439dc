"""Static status page served at ``GET /``; polls ``/health`` every 30s."""

STATUS_PAGE_HTML = """<!doctype html>
<html>
  <head>
    <title>FB Interest Proxy</title>
    <style>
      body {
        font-family: system-ui, sans-serif;
        background: #f6f7fb;
        color: #333;
        text-align: center;
        padding: 50px;
      }
      h1 { color: #1877f2; margin-bottom: 10px; }
      .status {
        display: inline-block;
        padding: 10px 20px;
        border-radius: 8px;
        background: #eaf3ff;
        border: 1px solid #c8defc;
        color: #1877f2;
        font-weight: 600;
      }
      footer { margin-top: 30px; font-size: 13px; color: #666; }
    </style>
  </head>
  <body>
    <h1>FB Interest Proxy</h1>
    <div class="status" id="status">Checking...</div>
    <p>Custom GPT connection check</p>
    <footer>Powered by Meta Graph API</footer>
    <script>
      async function checkHealth() {
        try {
          const res = await fetch("/health");
          await res.json();
          document.getElementById("status").innerText = "Online";
        } catch {
          document.getElementById("status").innerText = "Offline";
        }
      }
      checkHealth();
      setInterval(checkHealth, 30000);
    </script>
  </body>
</html>
"""
