"""Chart configuration, validation, and rendering helpers.

Published indicators store operator-authored chart JSON. This package holds
the accepted schema, submission validation, panel JSON encoding, and the
Chart.js rendering used by the topic pages.
"""
