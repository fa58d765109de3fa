"""
Stock Manager Backend — Services Layer
=======================================

What:  The statements behind every endpoint, independent of HTTP.

Service Inventory:
    - CrudService: create / list_all / list_by / update / delete for one table
    - category_service, sub_category_service, component_service,
      sub_component_service: the four configured instances

Services are stateless singletons; the AsyncSession is passed per call.
"""
