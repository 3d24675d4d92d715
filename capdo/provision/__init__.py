"""

.. _userdata:

capdo.provision
---------------

Bootstrap scripts for new machines.

A control plane machine receives the environment below, followed by the
provider's metadata script:

.. literalinclude:: ../capdo/provision/userdata.py
   :start-after: # the environment for control plane instances
   :end-before: # the environment for worker instances

Workers additionally get the ``MASTER`` address to join, but no
``CONTROL_PLANE_VERSION``. See :func:`capdo.provision.userdata.userdata`.

"""
