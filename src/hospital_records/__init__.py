"""Hospital Records - administrative records for a single-operator hospital desk.

Patients, staff, appointments, services, pharmacy stock, invoices and user
accounts are kept in one JSON document and managed from the command line.
"""

__version__ = "0.1.0"
